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

from typing import Dict, List, Optional

from pycombinator import parser as m_parser


def or_else_char_to_char_where(parser: m_parser.Parser) -> m_parser.Parser:
    """Rewrite chains of single-character alternatives into predicates.

    A chain like `char('a') | char('b') | char('c')` costs up to one failed
    attempt per alternative for every character parsed. This replaces
    every such chain (of any nesting) with a single `CharWhere` node that
    tests membership in the set of characters instead.

    The rewritten parser returns exactly the same results as the original
    one on every input, failures included: the new node reports failures
    the way the last alternative of the chain would have.

    The parser passed in is not modified. Sub-parsers that are only known
    at evaluation time (`delay()`, `memoize()`, `recursive_bind()`) are
    left alone.
    """
    return _rewrite(parser)


optimize = or_else_char_to_char_where


def _rewrite(node):
    # pylint: disable=too-many-return-statements
    if node.t == 'or_else':
        chars = _collect_chars(node, {})
        if chars is not None:
            return _to_char_where(chars)
        right = node.right
        rewritten = m_parser.Memoized(lambda: _rewrite(right()))
        return m_parser.OrElse(_rewrite(node.left), rewritten.force)
    if node.t == 'map':
        return m_parser.Map(_rewrite(node.source), node.fn)
    if node.t == 'bind':
        return m_parser.Bind(_rewrite(node.source), node.fn)
    if node.t == 'product':
        return m_parser.Product(_rewrite(node.left), _rewrite(node.right))
    if node.t == 'and':
        return m_parser.And(
            _rewrite(node.left), _rewrite(node.right), node.combine
        )
    if node.t == 'repeat':
        return m_parser.Repeat(_rewrite(node.source), *node.v)
    if node.t == 'repeat_between':
        return m_parser.RepeatBetween(_rewrite(node.source), *node.v)
    if node.t == 'repeat_accumulator':
        return m_parser.RepeatAccumulator(_rewrite(node.source), *node.v)
    return node


def _collect_chars(node, seen: Dict[int, m_parser.Parser]) -> Optional[List]:
    """Returns the Char leaves of an or_else chain, left to right.

    Returns None if anything other than Char and OrElse nodes is found,
    or if the chain loops back on itself.
    """
    if node.t == 'char':
        return [node]
    if node.t != 'or_else' or id(node) in seen:
        return None
    seen[id(node)] = node
    left = _collect_chars(node.left, seen)
    if left is None:
        return None
    right = _collect_chars(node.right(), seen)
    if right is None:
        return None
    return left + right


def _to_char_where(chars):
    members = frozenset(c.v for c in chars)
    return m_parser.CharWhere(members.__contains__, chars[-1].description)
