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

"""The outcome of running a parser over some input.

A parse either succeeds, producing a `Success`, or fails, producing a
`Failure`. Neither copies the input: both hold the original string and
an index into it.
"""

from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True)
class Success:
    """The parse succeeded.

    `value` is the parsed value, `input` is the text that was parsed and
    `offset` is the index where any remaining input starts.
    """

    value: Any
    input: str
    offset: int

    is_success = True
    is_failure = False

    def map(self, fn: Callable[[Any], Any]) -> 'Success':
        return Success(fn(self.value), self.input, self.offset)

    @property
    def remaining(self) -> str:
        return self.input[self.offset :]


@dataclass(frozen=True)
class Failure:
    """The parse failed.

    `reason` describes why, `input` is the text the parser attempted to
    parse and `start` is the index where the failing parser started from.
    """

    reason: str
    input: str
    start: int

    is_success = False
    is_failure = True

    def map(self, fn: Callable[[Any], Any]) -> 'Failure':
        del fn
        return self

    @property
    def remaining(self) -> str:
        return self.input[self.start :]

    @property
    def lineno(self) -> int:
        return self.input.count('\n', 0, self.start) + 1

    @property
    def colno(self) -> int:
        return self.start - (self.input.rfind('\n', 0, self.start) + 1) + 1

    def format(self, path: str = '<string>') -> str:
        return f'{path}:{self.lineno} {self.reason}'


Result = Union[Success, Failure]


@dataclass(frozen=True)
class Left:
    """Keep going: the value is the seed for the next step."""

    value: Any


@dataclass(frozen=True)
class Right:
    """Done: the value is the final result."""

    value: Any


Either = Union[Left, Right]
