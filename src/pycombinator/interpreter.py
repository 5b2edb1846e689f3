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

import logging
from typing import Any, Callable

from pycombinator import parser as m_parser
from pycombinator.result import Failure, Left, Result, Right, Success


log = logging.getLogger('pycombinator')


def evaluate(
    parser: m_parser.Parser, text: str, trace: bool = False
) -> Result:
    """Runs `parser` over `text`, starting at the beginning of `text`.

    Returns a `Success` holding the parsed value and the offset where the
    parser stopped, or a `Failure` holding the reason and the offset where
    the failing parser started. Failures are never raised as exceptions;
    exceptions raised by user-supplied functions (map functions,
    predicates, and so on) propagate unchanged.

    If `trace` is True, each node tried and each failure is logged at
    DEBUG level to the `pycombinator` logger.
    """
    return Interpreter(text, trace).run(parser)


class Interpreter:
    """Walks a parser tree over one fixed input string.

    An Interpreter only holds the text being parsed; the parser trees
    themselves are never modified, so the same tree can be run by any
    number of interpreters at once.
    """

    def __init__(self, text: str, trace: bool = False):
        self._text = text
        self._end = len(text)
        self._trace = trace

    def run(self, parser: m_parser.Parser) -> Result:
        return self._interpret(parser, 0)

    def _interpret(self, node, index) -> Result:
        fn = getattr(self, f'_ty_{node.t}', None)
        assert fn, f"Unimplemented node type '{node.t}'"
        if self._trace:
            log.debug('trying %s at %d', node.t, index)
        result = fn(node, index)  # pylint: disable=not-callable
        if self._trace and result.is_failure:
            log.debug(
                '%s failed at %d: %s', node.t, result.start, result.reason
            )
        return result

    def _succeed(self, value, offset) -> Success:
        return Success(value, self._text, offset)

    def _fail(self, reason, start) -> Failure:
        return Failure(reason, self._text, start)

    def _one_char(
        self, index: int, matches: Callable[[str], Any], description: str
    ) -> Result:
        if index >= self._end:
            return self._fail(
                f'Input has ended but was expecting {description}', index
            )
        c = self._text[index]
        if matches(c):
            return self._succeed(c, index + 1)
        return self._fail(
            f'Input did not contain {description} at index {index}', index
        )

    def _ty_and(self, node, index):
        left = self._interpret(node.left, index)
        if left.is_failure:
            return left
        right = self._interpret(node.right, left.offset)
        if right.is_failure:
            return right
        return self._succeed(
            node.combine(left.value, right.value), right.offset
        )

    def _ty_bind(self, node, index):
        r = self._interpret(node.source, index)
        if r.is_failure:
            return r
        return self._interpret(node.fn(r.value), r.offset)

    def _ty_char(self, node, index):
        return self._one_char(index, node.v.__eq__, node.description)

    def _ty_char_where(self, node, index):
        return self._one_char(index, node.predicate, node.description)

    def _ty_delayed(self, node, index):
        return self._interpret(node.thunk(), index)

    def _ty_fail(self, node, index):
        return self._fail(node.reason, index)

    def _ty_identity(self, node, index):
        return self._succeed(node.identity, index)

    def _ty_literal(self, node, index):
        if self._text.startswith(node.v, index):
            return self._succeed(node.v, index + len(node.v))
        return self._fail(
            f'Input did not start with {node.v} at index {index}', index
        )

    def _ty_map(self, node, index):
        return self._interpret(node.source, index).map(node.fn)

    def _ty_memoized(self, node, index):
        return self._interpret(node.force(), index)

    def _ty_or_else(self, node, index):
        left = self._interpret(node.left, index)
        if left.is_success:
            return left
        return self._interpret(node.right(), index)

    def _ty_product(self, node, index):
        left = self._interpret(node.left, index)
        if left.is_failure:
            return left
        right = self._interpret(node.right, left.offset)
        if right.is_failure:
            return right
        return self._succeed((left.value, right.value), right.offset)

    def _ty_pure(self, node, index):
        return self._succeed(node.value, index)

    def _ty_recursive_bind(self, node, index):
        # Each Left(seed) restarts the loop rather than recursing, so
        # arbitrarily long chains run in constant stack space.
        fn, seed = node.v
        while True:
            r = self._interpret(fn(seed), index)
            if r.is_failure:
                return r
            step = r.value
            if isinstance(step, Left):
                seed, index = step.value, r.offset
                continue
            assert isinstance(step, Right), (
                f'recursive_bind step returned {step!r}, not Left or Right'
            )
            return self._succeed(step.value, r.offset)

    def _ty_repeat(self, node, index):
        value = node.identity
        while True:
            r = self._interpret(node.source, index)
            if r.is_failure or r.offset == index:
                # A match that consumed nothing would match forever.
                break
            value = node.combine(value, r.value)
            index = r.offset
        return self._succeed(value, index)

    def _ty_repeat_accumulator(self, node, index):
        start = index
        accumulator = node.accumulator
        accum = accumulator.create()
        count = 0
        while True:
            r = self._interpret(node.source, index)
            if r.is_failure or r.offset == index:
                break
            accum = accumulator.append(accum, r.value)
            count += 1
            index = r.offset
        if count < node.minimum:
            return self._fail(
                f'Expected at least {node.minimum} repetitions '
                f'but matched {count}',
                start,
            )
        return self._succeed(accumulator.retrieve(accum), index)

    def _ty_repeat_between(self, node, index):
        start = index
        minimum, maximum, value, combine = node.v
        count = 0
        while count < maximum:
            r = self._interpret(node.source, index)
            if r.is_failure:
                break
            value = combine(value, r.value)
            count += 1
            index = r.offset
        if count < minimum:
            return self._fail(
                f'Did not match between {minimum} and {maximum} times', start
            )
        return self._succeed(value, index)
