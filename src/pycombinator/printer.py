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

from pycombinator import parser as m_parser


class Printer:
    """Formats a parser tree as an indented outline, one node per line.

    Thunks (the right side of an or_else, delay() and memoize() nodes)
    are never called, so printing a recursive grammar always terminates.
    """

    def __init__(self, parser: m_parser.Parser, indent: str = '  '):
        self._parser = parser
        self._indent = indent

    def dumps(self) -> str:
        lines = []
        self._proc(self._parser, 0, lines)
        return '\n'.join(lines) + '\n'

    def _proc(self, node, depth, lines):
        fn = getattr(self, f'_ty_{node.t}')
        lines.append(self._indent * depth + fn(node))
        for c in node.ch:
            self._proc(c, depth + 1, lines)
        if node.t == 'or_else':
            lines.append(self._indent * (depth + 1) + '<lazy>')

    #
    # Handlers for each kind of parser node follow.
    #

    def _ty_and(self, node):
        return 'and ' + _name(node.combine)

    def _ty_bind(self, node):
        return 'bind ' + _name(node.fn)

    def _ty_char(self, node):
        return 'char ' + repr(node.v)

    def _ty_char_where(self, node):
        return 'char_where ' + node.description

    def _ty_delayed(self, node):
        del node
        return 'delayed <lazy>'

    def _ty_fail(self, node):
        return 'fail ' + repr(node.reason)

    def _ty_identity(self, node):
        return 'identity ' + repr(node.identity)

    def _ty_literal(self, node):
        return 'literal ' + repr(node.v)

    def _ty_map(self, node):
        return 'map ' + _name(node.fn)

    def _ty_memoized(self, node):
        del node
        return 'memoized <lazy>'

    def _ty_or_else(self, node):
        del node
        return 'or_else'

    def _ty_product(self, node):
        del node
        return 'product'

    def _ty_pure(self, node):
        return 'pure ' + repr(node.value)

    def _ty_recursive_bind(self, node):
        return f'recursive_bind {_name(node.fn)} seed={node.seed!r}'

    def _ty_repeat(self, node):
        return f'repeat identity={node.identity!r}'

    def _ty_repeat_accumulator(self, node):
        return (
            f'repeat_accumulator minimum={node.minimum} '
            + node.accumulator.__class__.__name__
        )

    def _ty_repeat_between(self, node):
        return f'repeat_between {node.minimum}..{node.maximum}'


def _name(fn):
    return getattr(fn, '__name__', repr(fn))
