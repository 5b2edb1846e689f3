#!/usr/bin/env python
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

"""Parse (and optionally evaluate) arithmetic expressions."""

import argparse
import importlib.util
import json
import logging
import pathlib
import sys

# If necessary, add ../.. to sys.path so that we can run pycombinator even
# when it's not installed.
if (
    'pycombinator' not in sys.modules
    and importlib.util.find_spec('pycombinator') is None
):
    sys.path.insert(
        0, str(pathlib.Path(__file__).parent.parent)
    )  # pragma: no cover

# pylint: disable=wrong-import-position
import pycombinator
from pycombinator import expression, interpreter, support


def main(argv=None, host=None):
    host = host or support.Host()

    handler = None
    try:
        args, err = _parse_args(host, argv)
        if err is not None:
            return err

        if args.trace:
            handler = logging.StreamHandler(host.stderr)
            handler.setFormatter(logging.Formatter('%(name)s: %(message)s'))
            interpreter.log.addHandler(handler)
            interpreter.log.setLevel(logging.DEBUG)

        if args.tree:
            grammar = expression.expression
            if args.optimize:
                grammar = pycombinator.optimize(grammar)
            contents = pycombinator.dump_tree(grammar)
        else:
            text, path, err = _read_input(host, args)
            if err:
                host.print(err, file=host.stderr)
                return 1
            contents, err = _parse(args, text, path)
            if err:
                host.print(err, file=host.stderr)
                return 1

        _write(host, args, contents)
        return 0

    except RecursionError:
        host.print('Error: expression is too deeply nested', file=host.stderr)
        return 1
    except KeyboardInterrupt:  # pragma: no cover
        host.print('Interrupted, exiting.', file=host.stderr)
        return 130  # SIGINT
    finally:
        if handler:
            interpreter.log.removeHandler(handler)
            interpreter.log.setLevel(logging.NOTSET)


def _parse_args(host, argv):
    ap = argparse.ArgumentParser(prog='pycombinator')
    ap.add_argument(
        '-c', '--code', metavar='text', help='expression to parse'
    )
    ap.add_argument(
        '-D',
        '--define',
        action='append',
        metavar='name=value',
        default=[],
        type=_definition,
        help='bind a variable to an integer value (used with --eval)',
    )
    ap.add_argument(
        '-e',
        '--eval',
        action='store_true',
        help='print the value of the expression instead of its AST',
    )
    ap.add_argument(
        '-i',
        '--input',
        action='store',
        default='-',
        help='path to read the expression from',
    )
    ap.add_argument(
        '-O',
        '--optimize',
        action='store_true',
        help='rewrite character alternatives into predicates before parsing',
    )
    ap.add_argument(
        '-o', '--output', metavar='path', help='path to write output to'
    )
    ap.add_argument(
        '--trace',
        action='store_true',
        help='log every parser tried to stderr',
    )
    ap.add_argument(
        '--tree',
        action='store_true',
        help='print the parser tree of the expression grammar',
    )
    ap.add_argument(
        '-V',
        '--version',
        action='store_true',
        help=f'print current version ({pycombinator.__version__})',
    )

    args = ap.parse_args(argv)

    if args.version:
        host.print(pycombinator.__version__)
        return None, 0

    return args, None


def _definition(s):
    name, sep, value = s.partition('=')
    if not sep or not name:
        raise argparse.ArgumentTypeError(
            f'"{s}" is not of the form name=value'
        )
    try:
        return name, int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f'"{value}" is not an integer'
        ) from exc


def _read_input(host, args):
    if args.code is not None:
        return args.code, '<code>', None
    if args.input == '-':
        return host.stdin.read().rstrip('\n'), '<stdin>', None
    if not host.exists(args.input):
        return None, None, f'Error: no such file: "{args.input}"'
    return host.read_text_file(args.input).rstrip('\n'), args.input, None


def _parse(args, text, path):
    try:
        expr = pycombinator.parse_value(
            expression.expression,
            text,
            path=path,
            optimize=args.optimize,
            trace=args.trace,
        )
    except pycombinator.ParseError as exc:
        return None, str(exc)

    if not args.eval:
        return json.dumps(expr.to_json(), indent=2) + '\n', None

    try:
        return f'{expr.evaluate(dict(args.define))}\n', None
    except KeyError as exc:
        return None, f'{path}: {exc.args[0]}'


def _write(host, args, contents):
    if args.output and args.output != '-':
        host.write_text_file(args.output, contents)
    else:
        host.print(contents, end='')


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
