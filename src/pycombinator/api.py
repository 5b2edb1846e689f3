# Copyright 2024 Google Inc. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import json
from typing import Any

from pycombinator import interpreter
from pycombinator import optimizer
from pycombinator import parser as m_parser
from pycombinator import printer
from pycombinator.result import Failure, Result


class ParseError(ValueError):
    """Exception raised by `parse_value()` when the text doesn't parse.

    This is a subclass of ValueError, and so can be caught by code
    that catches ValueError.

    `reason`, `path`, `start`, `lineno` and `colno` describe the failure;
    `str()` of the exception is the formatted message.
    """

    def __init__(self, failure: Failure, path: str = '<string>'):
        super().__init__(failure.format(path))
        self.reason = failure.reason
        self.path = path
        self.start = failure.start
        self.lineno = failure.lineno
        self.colno = failure.colno


def parse(
    parser: m_parser.Parser,
    text: str,
    optimize: bool = False,
    trace: bool = False,
) -> Result:
    """Match an input text against a parser.

    If `optimize` is True the parser is first passed through
    `optimizer.optimize()`; this gives the same results but may be faster
    for parsers that contain chains of single-character alternatives.
    If `trace` is True every node tried is logged at DEBUG level to the
    `pycombinator` logger.

    The returned object is either a `Success`, whose `value` member holds
    the parsed value and whose `offset` member points to the position in
    the string where the parser stopped, or a `Failure`, whose `reason`
    member describes what went wrong and whose `start` member points to
    where the failing parser started.
    """
    if optimize:
        parser = optimizer.optimize(parser)
    return interpreter.evaluate(parser, text, trace=trace)


def parse_value(
    parser: m_parser.Parser,
    text: str,
    path: str = '<string>',
    allow_trailing: bool = False,
    optimize: bool = False,
    trace: bool = False,
) -> Any:
    """Match an input text against a parser, returning the parsed value.

    Works like `parse()` (and takes the same `optimize` and `trace`
    arguments), but raises `ParseError` instead of returning a
    `Failure`. `path` can be used to indicate where the text came from
    (e.g., a file path) and is included in the error message.

    Unless `allow_trailing` is True, it is also an error for the parser
    to stop before the end of the text.
    """
    result = parse(parser, text, optimize=optimize, trace=trace)
    if result.is_failure:
        raise ParseError(result, path)
    if not allow_trailing and result.offset != len(text):
        raise ParseError(_trailing_failure(result), path)
    return result.value


def dump_tree(parser: m_parser.Parser) -> str:
    """Returns a printable outline of the parser tree.

    Possibly useful for debugging.
    """
    return printer.Printer(parser).dumps()


def _trailing_failure(result):
    text, offset = result.input, result.offset
    colno = offset - text.rfind('\n', 0, offset)
    thing = json.dumps(text[offset], ensure_ascii=False)
    return Failure(
        f'Unexpected {thing} at column {colno}',
        text,
        offset,
    )
