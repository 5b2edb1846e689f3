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
import unittest
from unittest import mock

import pycombinator
from pycombinator import expression, tool
from pycombinator.support import FakeHost


class ToolTest(unittest.TestCase):
    maxDiff = None

    def check(self, args, stdin=None, files=None, returncode=0):
        host = FakeHost()
        for path, contents in (files or {}).items():
            host.write_text_file(path, contents)
        if stdin:
            host.stdin.write(stdin)
            host.stdin.seek(0)
        ret = tool.main(args, host=host)
        self.assertEqual(ret, returncode)
        return host, host.stdout.getvalue(), host.stderr.getvalue()

    def test_ast(self):
        _, out, err = self.check(['-c', '1 + 2'])
        self.assertEqual(err, '')
        self.assertEqual(json.loads(out), ['add', ['lit', 1], ['lit', 2]])

    def test_eval(self):
        _, out, _ = self.check(['--eval', '-c', '1 + 2 * x', '-D', 'x=3'])
        self.assertEqual(out, '7\n')

    def test_optimize(self):
        _, out, _ = self.check(['--eval', '-O', '-c', '12 * 12'])
        self.assertEqual(out, '144\n')

    def test_stdin(self):
        _, out, _ = self.check(['--eval'], stdin='2 * 3\n')
        self.assertEqual(out, '6\n')

    def test_input_file(self):
        _, out, _ = self.check(
            ['--eval', '-i', 'expr.txt'], files={'expr.txt': '4 + 4\n'}
        )
        self.assertEqual(out, '8\n')

    def test_missing_input_file(self):
        _, out, err = self.check(['-i', 'nope.txt'], returncode=1)
        self.assertEqual(out, '')
        self.assertEqual(err, 'Error: no such file: "nope.txt"\n')

    def test_parse_error(self):
        _, out, err = self.check(['-c', '1 +'], returncode=1)
        self.assertEqual(out, '')
        self.assertEqual(err, '<code>:1 Unexpected " " at column 2\n')

    def test_unbound_variable(self):
        _, out, err = self.check(['--eval', '-c', 'y'], returncode=1)
        self.assertEqual(out, '')
        self.assertEqual(err, '<code>: Unbound variable "y"\n')

    def test_bad_definition(self):
        with self.assertRaises(SystemExit):
            tool.main(['-D', 'x'], host=FakeHost())
        with self.assertRaises(SystemExit):
            tool.main(['-D', 'x=y'], host=FakeHost())

    def test_output_file(self):
        host, out, _ = self.check(['--eval', '-c', '5', '-o', 'out.txt'])
        self.assertEqual(out, '')
        self.assertEqual(host.files['/tmp/out.txt'], '5\n')

    def test_tree(self):
        _, out, _ = self.check(['--tree'])
        self.assertTrue(
            out.startswith('map _sum\n  product\n    map _product\n')
        )

    def test_optimized_tree(self):
        _, out, _ = self.check(['--tree', '-O'])
        self.assertIn('char_where character 9', out)
        self.assertNotIn("char '0'", out)

    def test_trace(self):
        _, out, err = self.check(['--trace', '--eval', '-c', '1'])
        self.assertEqual(out, '1\n')
        self.assertIn('pycombinator: trying or_else at 0\n', err)
        self.assertIn('pycombinator: trying char at 0\n', err)

    def test_long_expression(self):
        text = ' + '.join(['1'] * 1000)
        _, out, err = self.check(['--eval', '-c', text])
        self.assertEqual(err, '')
        self.assertEqual(out, '1000\n')

    def test_too_deeply_nested(self):
        with mock.patch.object(
            expression.Lit, 'evaluate', side_effect=RecursionError
        ):
            _, out, err = self.check(['--eval', '-c', '1'], returncode=1)
        self.assertEqual(out, '')
        self.assertEqual(err, 'Error: expression is too deeply nested\n')

    def test_version(self):
        _, out, _ = self.check(['--version'])
        self.assertEqual(out, pycombinator.__version__ + '\n')


if __name__ == '__main__':  # pragma: no cover
    unittest.main()
