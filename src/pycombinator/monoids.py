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

"""Ways of folding together the values of repeated parsers.

A `Monoid` is an identity value plus a binary `combine` function. It is
a named tuple so that it can be splatted into any of the combinators
that take an `identity, combine` pair:

    digits = digit.repeat(*monoids.STRING)

An `Accumulator` instead collects values into a private, mutable object
that is created fresh for each evaluation, which avoids building a new
value on every repetition.
"""

import operator
from typing import Any, Callable, NamedTuple, Protocol


class Monoid(NamedTuple):
    identity: Any
    combine: Callable[[Any, Any], Any]


def _keep_none(x, y):
    del x, y


STRING = Monoid('', operator.add)

LIST = Monoid([], operator.add)

SUM = Monoid(0, operator.add)

UNIT = Monoid(None, _keep_none)


class Accumulator(Protocol):
    def create(self) -> Any:
        """Returns a new, empty accumulator."""

    def append(self, accum: Any, value: Any) -> Any:
        """Adds `value` to `accum` and returns the accumulator."""

    def retrieve(self, accum: Any) -> Any:
        """Returns the final value collected in `accum`."""


class ListAccumulator:
    def create(self):
        return []

    def append(self, accum, value):
        accum.append(value)
        return accum

    def retrieve(self, accum):
        return accum


class StringAccumulator:
    def create(self):
        return []

    def append(self, accum, value):
        accum.append(value)
        return accum

    def retrieve(self, accum):
        return ''.join(accum)


class CountAccumulator:
    def create(self):
        return 0

    def append(self, accum, value):
        del value
        return accum + 1

    def retrieve(self, accum):
        return accum
