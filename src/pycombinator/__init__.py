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

"""A parser-combinator library with a tree-walking interpreter."""

from pycombinator.api import ParseError, dump_tree, parse, parse_value
from pycombinator.interpreter import Interpreter, evaluate
from pycombinator.monoids import (
    Accumulator,
    CountAccumulator,
    ListAccumulator,
    Monoid,
    StringAccumulator,
)
from pycombinator.optimizer import optimize, or_else_char_to_char_where
from pycombinator.parser import (
    Parser,
    char,
    char_in,
    char_where,
    delay,
    fail,
    identity,
    literal,
    map_n,
    memoize,
    pure,
    recursive_bind,
    string_in,
    tupled,
)
from pycombinator.result import Either, Failure, Left, Result, Right, Success
from pycombinator.version import __version__

__all__ = [
    '__version__',
    'Accumulator',
    'CountAccumulator',
    'Either',
    'Failure',
    'Interpreter',
    'Left',
    'ListAccumulator',
    'Monoid',
    'ParseError',
    'Parser',
    'Result',
    'Right',
    'StringAccumulator',
    'Success',
    'char',
    'char_in',
    'char_where',
    'delay',
    'dump_tree',
    'evaluate',
    'fail',
    'identity',
    'literal',
    'map_n',
    'memoize',
    'optimize',
    'or_else_char_to_char_where',
    'parse',
    'parse_value',
    'pure',
    'recursive_bind',
    'string_in',
    'tupled',
]
