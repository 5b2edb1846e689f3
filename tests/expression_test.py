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

import unittest

from hypothesis import given
from hypothesis import strategies as st

import pycombinator
from pycombinator import expression
from pycombinator.expression import Add, Lit, Mul, Var


class ExpressionTest(unittest.TestCase):
    maxDiff = None

    def test_sum(self):
        r = expression.parse_expression('1 + 2 + 3')
        self.assertEqual(
            r,
            pycombinator.Success(
                Add(Lit(1), Add(Lit(2), Lit(3))), '1 + 2 + 3', 9
            ),
        )
        self.assertEqual(r.value.evaluate(), 6)

    def test_precedence(self):
        self.assertEqual(
            expression.parse_expression('2 * 3 + 4').value,
            Add(Mul(Lit(2), Lit(3)), Lit(4)),
        )
        self.assertEqual(
            expression.parse_expression('1 + 2 * 3').value,
            Add(Lit(1), Mul(Lit(2), Lit(3))),
        )
        self.assertEqual(expression.evaluate('1 + 2 * 3'), 7)
        self.assertEqual(expression.evaluate('2 * 3 + 4'), 10)

    def test_multi_digit_numbers(self):
        self.assertEqual(
            expression.evaluate(
                '1100 + 24 * 357 * 389 + 8123 * 4998 + 88342'
            ),
            1100 + 24 * 357 * 389 + 8123 * 4998 + 88342,
        )

    def test_variables(self):
        self.assertEqual(
            expression.parse_expression('x * y').value,
            Mul(Var('x'), Var('y')),
        )
        self.assertEqual(expression.evaluate('x * 2', {'x': 5}), 10)
        with self.assertRaises(KeyError):
            expression.evaluate('x * 2')

    def test_right_associative(self):
        self.assertEqual(
            expression.parse_expression('1 * 2 * 3').value,
            Mul(Lit(1), Mul(Lit(2), Lit(3))),
        )
        self.assertEqual(
            expression.parse_expression('1 * x + 2 * 3 + y').value,
            Add(
                Mul(Lit(1), Var('x')),
                Add(Mul(Lit(2), Lit(3)), Var('y')),
            ),
        )

    def test_long_expressions(self):
        self.assertEqual(expression.evaluate(' + '.join(['1'] * 1000)), 1000)
        self.assertEqual(
            expression.evaluate(' * '.join(['2'] * 1000)), 2**1000
        )
        text = ' + '.join(['2 * x'] * 1000)
        self.assertEqual(expression.evaluate(text, {'x': 3}), 6000)

        tree = expression.parse_expression(text).value
        for _ in range(999):
            self.assertIsInstance(tree, Add)
            self.assertEqual(tree.left, Mul(Lit(2), Var('x')))
            tree = tree.right
        self.assertEqual(tree, Mul(Lit(2), Var('x')))

    def test_operators(self):
        self.assertEqual(Lit(1) + Var('x'), Add(Lit(1), Var('x')))
        self.assertEqual(Lit(1) * Var('x'), Mul(Lit(1), Var('x')))

    def test_to_json(self):
        self.assertEqual(
            expression.parse_expression('1 + x * 2').value.to_json(),
            ['add', ['lit', 1], ['mul', ['var', 'x'], ['lit', 2]]],
        )

    def test_failure(self):
        self.assertEqual(
            expression.parse_expression('+'),
            pycombinator.Failure(
                'Input did not contain a letter at index 0', '+', 0
            ),
        )

    def test_trailing_input(self):
        with self.assertRaises(pycombinator.ParseError) as cm:
            expression.evaluate('1 +')
        self.assertEqual(
            str(cm.exception), '<string>:1 Unexpected " " at column 2'
        )

    @given(
        st.lists(
            st.one_of(st.integers(0, 999).map(str), st.sampled_from('xyz')),
            min_size=1,
            max_size=6,
        ),
        st.lists(st.sampled_from([' + ', ' * ']), min_size=5, max_size=5),
    )
    def test_optimize_preserves_results(self, operands, operators):
        text = operands[0]
        for operand, op in zip(operands[1:], operators):
            text += op + operand
        self.assertEqual(
            expression.parse_expression(text, optimize=True),
            expression.parse_expression(text),
        )


if __name__ == '__main__':  # pragma: no cover
    unittest.main()
