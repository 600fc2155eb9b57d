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
import enum
from typing import Any

__all__ = ("ExpressionType", "FilterFunction")


class ExpressionType(enum.Enum):
    value = enum.auto()
    logical = enum.auto()
    nodes = enum.auto()


class FilterFunction:
    """Base class for functions that can be called from a filter expression.

    Subclasses declare the types of their parameters in ``arg_types`` and
    the type of their result in ``return_type``. The parser checks every
    call site against these declarations, so by the time ``__call__`` runs
    each argument has already been converted to the declared type:

    * ``ExpressionType.value``: a JSON value or ``NOTHING``
    * ``ExpressionType.logical``: a ``bool``
    * ``ExpressionType.nodes``: a ``NodeList``

    A result used as a test, from a ``logical`` or ``nodes`` function, is
    read by truthiness.
    """

    arg_types: tuple[ExpressionType, ...] = ()
    return_type: ExpressionType = ExpressionType.value

    def __repr__(self):
        return f"<{type(self).__name__}>"

    def __call__(self, *args: Any) -> Any:
        raise NotImplementedError
