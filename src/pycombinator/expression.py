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

"""A small arithmetic expression grammar.

Expressions are sums of products of numbers and variables, with the
operators surrounded by single spaces, e.g. `1 + 2 * x`. Both operators
are right-associative, and `*` binds tighter than `+`.

The operands of a run of `+` (or `*`) are collected by a repeat and
then folded into a tree, and the trees are walked with an explicit
stack, so long expressions don't run into Python's recursion limit.
"""

import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from pycombinator import api
from pycombinator import monoids
from pycombinator.parser import char_in, char_where, literal


class Expr:
    def __add__(self, that: 'Expr') -> 'Expr':
        return Add(self, that)

    def __mul__(self, that: 'Expr') -> 'Expr':
        return Mul(self, that)

    def evaluate(self, env: Optional[Mapping[str, int]] = None) -> int:
        return self._fold(
            lambda leaf: leaf.evaluate(env),
            lambda node, left, right: node.combine(left, right),
        )

    def to_json(self) -> Any:
        return self._fold(
            lambda leaf: leaf.to_json(),
            lambda node, left, right: [node.tag, left, right],
        )

    def _fold(self, leaf: Callable, branch: Callable) -> Any:
        values = []
        stack = [(self, False)]
        while stack:
            expr, visited = stack.pop()
            if not isinstance(expr, BinOp):
                values.append(leaf(expr))
            elif visited:
                right = values.pop()
                left = values.pop()
                values.append(branch(expr, left, right))
            else:
                stack.append((expr, True))
                stack.append((expr.right, False))
                stack.append((expr.left, False))
        return values[0]


@dataclass(frozen=True)
class Lit(Expr):
    value: int

    def evaluate(self, env=None):
        return self.value

    def to_json(self):
        return ['lit', self.value]


@dataclass(frozen=True)
class Var(Expr):
    name: str

    def evaluate(self, env=None):
        env = env or {}
        if self.name not in env:
            raise KeyError(f'Unbound variable "{self.name}"')
        return env[self.name]

    def to_json(self):
        return ['var', self.name]


@dataclass(frozen=True)
class BinOp(Expr):
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Add(BinOp):
    tag = 'add'
    combine = staticmethod(operator.add)


@dataclass(frozen=True)
class Mul(BinOp):
    tag = 'mul'
    combine = staticmethod(operator.mul)


def _fold_right(pair, combine):
    first, rest = pair
    operands = [first, *rest]
    expr = operands.pop()
    while operands:
        expr = combine(operands.pop(), expr)
    return expr


def _sum(pair):
    return _fold_right(pair, Add)


def _product(pair):
    return _fold_right(pair, Mul)


digit = char_in('0', '1', '2', '3', '4', '5', '6', '7', '8', '9')

number = digit.repeat_with_accumulator(1, monoids.StringAccumulator()).map(
    lambda digits: Lit(int(digits))
)

variable = (
    char_where(str.isalpha, 'a letter')
    .one_or_more(monoids.STRING)
    .map(Var)
)

factor = number | variable

add = literal(' + ').void()

mul = literal(' * ').void()

term = factor.product(
    mul.keep_right(factor).repeat_with_accumulator(
        0, monoids.ListAccumulator()
    )
).map(_product)

expression = term.product(
    add.keep_right(term).repeat_with_accumulator(
        0, monoids.ListAccumulator()
    )
).map(_sum)


def parse_expression(text: str, optimize: bool = False):
    """Parses `text` as an expression, returning a Result.

    The whole of `text` need not be consumed; check the Success's offset
    (or use `api.parse_value()`) if that matters.
    """
    return api.parse(expression, text, optimize=optimize)


def evaluate(text: str, env: Optional[Dict[str, int]] = None) -> int:
    """Parses all of `text` and evaluates it; raises ParseError on errors."""
    return api.parse_value(expression, text).evaluate(env)
