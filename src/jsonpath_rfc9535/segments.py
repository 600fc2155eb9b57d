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
from dataclasses import dataclass
from typing import Callable, Iterable, Union

from .node import JSONPathNode, ValueKind, value_kind
from .selectors import Selector, resolve
from .tokens import Token

__all__ = (
    "Segment", "ChildSegment", "RecursiveDescentSegment", "resolve_segment",
    "descendants",
)


@dataclass(frozen=True)
class ChildSegment:
    token: Token
    selectors: tuple[Selector, ...]

    def __str__(self):
        return f"[{', '.join(str(s) for s in self.selectors)}]"


@dataclass(frozen=True)
class RecursiveDescentSegment:
    token: Token
    selectors: tuple[Selector, ...]

    def __str__(self):
        return f"..[{', '.join(str(s) for s in self.selectors)}]"


Segment = Union[ChildSegment, RecursiveDescentSegment]


def descendants(node: JSONPathNode) -> Iterable[JSONPathNode]:
    # Pre-order: the node itself, then each child's subtree in turn
    yield node

    value = node.value
    kind = value_kind(value)
    if kind == ValueKind.mapping:
        for key, subval in value.items():
            yield from descendants(node.new_child(subval, key))
    elif kind == ValueKind.sequence:
        for i, subval in enumerate(value):
            yield from descendants(node.new_child(subval, i))


def _resolve_child(segment: ChildSegment, nodes: Iterable[JSONPathNode]
                   ) -> Iterable[JSONPathNode]:
    for node in nodes:
        for selector in segment.selectors:
            yield from resolve(selector, node)


def _resolve_descendants(segment: RecursiveDescentSegment,
                         nodes: Iterable[JSONPathNode]
                         ) -> Iterable[JSONPathNode]:
    for node in nodes:
        for visited in descendants(node):
            for selector in segment.selectors:
                yield from resolve(selector, visited)


_segment_resolvers: dict[type, Callable[[Segment, Iterable[JSONPathNode]],
                                        Iterable[JSONPathNode]]] = {
    ChildSegment: _resolve_child,
    RecursiveDescentSegment: _resolve_descendants,
}


def resolve_segment(segment: Segment, nodes: Iterable[JSONPathNode]
                    ) -> Iterable[JSONPathNode]:
    return _segment_resolvers[type(segment)](segment, nodes)
