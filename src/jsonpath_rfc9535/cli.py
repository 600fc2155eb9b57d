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
import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from . import DEFAULT_ENV, __version__
from .exceptions import JSONPathError

__all__ = ("main",)

logger = logging.getLogger(__name__)


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonpath-rfc9535",
        description="Find values in a JSON document with an RFC 9535 "
                    "JSONPath query.",
    )
    parser.add_argument("query", help="JSONPath query, e.g. '$.store.book[0]'")
    parser.add_argument("file", nargs="?", type=argparse.FileType("r"),
                        default=sys.stdin,
                        help="JSON file to query (default: stdin)")
    parser.add_argument("--paths", action="store_true",
                        help="Print normalized paths instead of values")
    parser.add_argument("--indent", type=int, default=None,
                        help="Indent JSON output by this many spaces")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug messages to stderr")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = make_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="%(name)s: %(message)s")

    try:
        path = DEFAULT_ENV.compile(args.query)
        data = json.load(args.file)
    except JSONPathError as e:
        print(f"Invalid query: {e}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Invalid JSON: {e}", file=sys.stderr)
        return 1
    finally:
        if args.file is not sys.stdin:
            args.file.close()

    nodes = path.find(data)
    logger.debug("%s matched %d node(s)", path, len(nodes))
    if args.paths:
        for node_path in nodes.paths():
            print(node_path)
    else:
        print(json.dumps(nodes.values(), indent=args.indent))
    return 0
