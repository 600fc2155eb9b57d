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
from collections import OrderedDict
from typing import Any, Hashable, Optional

__all__ = ("LRUCache",)

logger = logging.getLogger(__name__)


class LRUCache:
    """A fixed capacity mapping that evicts the least recently used entry
    when a new key would take it over capacity.

    Both ``get`` and ``put`` count as a use. A capacity of zero stores
    nothing, so every ``get`` misses.

    Instances are not synchronized. Callers sharing one cache between
    threads must hold their own lock around ``get`` and ``put``.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"Cache capacity must be >= 0, not {capacity}")
        self.capacity = capacity
        self._data: OrderedDict[Hashable, Any] = OrderedDict()

    def __repr__(self):
        return f"{type(self).__name__}({self.capacity})"

    def __len__(self):
        return len(self._data)

    def __contains__(self, key: Hashable) -> bool:
        # Membership tests do not change the eviction order
        return key in self._data

    def get(self, key: Hashable, default: Optional[Any] = None) -> Any:
        if key not in self._data:
            return default
        self._data.move_to_end(key)
        return self._data[key]

    def put(self, key: Hashable, value: Any) -> None:
        if not self.capacity:
            return

        if key in self._data:
            self._data.move_to_end(key)
        elif len(self._data) >= self.capacity:
            evicted, _ = self._data.popitem(last=False)
            logger.debug("Evicted %r from %r", evicted, self)
        self._data[key] = value

    def keys(self) -> list[Hashable]:
        # Least recently used first
        return list(self._data)

    def clear(self) -> None:
        self._data.clear()
