# BSD 2-Clause License
#
# Copyright (c) 2023, Matt Chaput
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice, this
#    list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright notice,
#    this list of conditions and the following disclaimer in the documentation
#    and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
# DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
# FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
# OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from .node import JSONPathNode, JsonValue, NodeList
from .segments import ChildSegment, Segment, resolve_segment

if TYPE_CHECKING:
    from .environment import JSONPathEnvironment

__all__ = ("JSONPath",)

logger = logging.getLogger(__name__)


class JSONPath:
    """A compiled JSONPath query.

    Instances are immutable once built by the parser, so the same path can
    be used to query any number of documents, from any number of threads.
    """

    def __init__(self, env: JSONPathEnvironment, segments: Iterable[Segment]):
        self.env = env
        self.segments: tuple[Segment, ...] = tuple(segments)

    def __str__(self):
        return "$" + "".join(str(segment) for segment in self.segments)

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other):
        return type(self) is type(other) and self.segments == other.segments

    def __hash__(self):
        return hash((type(self), self.segments))

    def finditer(self, data: JsonValue, root: JsonValue = None
                 ) -> Iterable[JSONPathNode]:
        # The root argument lets a query embedded in a filter expression
        # start from the current node while `$` still means the document
        root = data if root is None else root
        nodes: Iterable[JSONPathNode] = [JSONPathNode(data, (), root)]
        trace = logger.isEnabledFor(logging.DEBUG)
        for segment in self.segments:
            nodes = resolve_segment(segment, nodes)
            if trace:
                nodes = list(nodes)
                logger.debug("%s: %s matched %d node(s)", self, segment,
                             len(nodes))
        return nodes

    def find(self, data: JsonValue, root: JsonValue = None) -> NodeList:
        return NodeList(self.finditer(data, root))

    def values(self, data: JsonValue) -> Sequence[JsonValue]:
        return [node.value for node in self.finditer(data)]

    def find_one(self, data: JsonValue) -> Optional[JSONPathNode]:
        return next(iter(self.finditer(data)), None)

    def empty(self) -> bool:
        return not self.segments

    def singular_query(self) -> bool:
        # True if this path can select at most one node
        return all(
            isinstance(segment, ChildSegment) and
            len(segment.selectors) == 1 and
            segment.selectors[0].singular
            for segment in self.segments
        )
