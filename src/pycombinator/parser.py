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

"""The parser algebra.

A parser is an immutable tree describing *what* to parse. Each kind of
node is a subclass of `Parser` with a short type tag (`t`), a payload
(`v`) and a list of child parsers (`ch`), and nothing here does any
parsing: the trees are walked by `pycombinator.interpreter`.

Leaves are built with the module-level constructors (`literal()`,
`char()`, `char_where()`, `pure()`, `fail()`, `identity()`), and bigger
parsers are built with the combinator methods every node has (`map()`,
`product()`, `bind()`, `or_else()`, `and_()`, the `repeat*()` family).
Self-referential grammars use `delay()`:

    expr = number.product(plus).product(delay(lambda: expr)) | number
"""

from typing import Any, Callable, List, Optional, Tuple, Union

from pycombinator import monoids


Thunk = Callable[[], 'Parser']


class Parser:
    v_alias: Optional[str] = None
    v_aliases: List[str] = []
    ch_aliases: List[str] = []

    def __init__(self, t: str, v: Any, ch: List['Parser']):
        object.__setattr__(self, 't', t)
        object.__setattr__(self, 'v', v)
        object.__setattr__(self, 'ch', tuple(ch))

    def __getattr__(self, attr: str) -> Any:
        if attr == self.v_alias:
            return self.v
        if attr in self.v_aliases:
            return self.v[self.v_aliases.index(attr)]
        if attr in self.ch_aliases:
            return self.ch[self.ch_aliases.index(attr)]
        return super().__getattribute__(attr)

    def __setattr__(self, attr: str, v: Any) -> None:
        raise AttributeError(
            f'{self.__class__.__name__} objects are immutable'
        )

    def __repr__(self):
        s = self.__class__.__name__ + '('
        s += ', '.join(f'{a}={repr(getattr(self, a))}' for a in self.attrs)
        s += ')'
        return s

    @property
    def attrs(self) -> Tuple[str, ...]:
        fn = self.__class__.__init__.__code__
        return fn.co_varnames[1 : fn.co_argcount]

    def __or__(self, that: Union['Parser', Thunk]) -> 'Parser':
        return self.or_else(that)

    def parse(self, text: str):
        """Runs this parser over `text`; see `interpreter.evaluate()`."""
        # pylint: disable=import-outside-toplevel
        from pycombinator import interpreter

        return interpreter.evaluate(self, text)

    def map(self, fn: Callable[[Any], Any]) -> 'Parser':
        return Map(self, fn)

    def product(self, that: 'Parser') -> 'Parser':
        return Product(self, that)

    def bind(self, fn: Callable[[Any], 'Parser']) -> 'Parser':
        return Bind(self, fn)

    def or_else(self, that: Union['Parser', Thunk]) -> 'Parser':
        """Tries `that` at the same position if this parser fails.

        `that` may be a Parser or a zero-argument callable returning one;
        a callable is only called when this parser actually fails, so it
        may refer to parsers that are not defined yet.
        """
        return OrElse(self, _thunk(that))

    def and_(self, that: 'Parser', combine: Callable[[Any, Any], Any]):
        return And(self, that, combine)

    def repeat(self, identity: Any, combine: Callable[[Any, Any], Any]):
        return Repeat(self, identity, combine)

    def repeat_between(
        self,
        minimum: int,
        maximum: int,
        identity: Any,
        combine: Callable[[Any, Any], Any],
    ) -> 'Parser':
        return RepeatBetween(self, minimum, maximum, identity, combine)

    def repeat_at_least(
        self, minimum: int, identity: Any, combine: Callable[[Any, Any], Any]
    ) -> 'Parser':
        parser: Parser = Repeat(self, identity, combine)
        for _ in range(minimum):
            parser = And(self, parser, combine)
        return parser

    def repeat_with_accumulator(
        self, minimum: int, accumulator: monoids.Accumulator
    ) -> 'Parser':
        return RepeatAccumulator(self, minimum, accumulator)

    def zero_or_more(self, monoid: monoids.Monoid) -> 'Parser':
        return self.repeat_at_least(0, *monoid)

    def one_or_more(self, monoid: monoids.Monoid) -> 'Parser':
        return self.repeat_at_least(1, *monoid)

    def as_(self, value: Any) -> 'Parser':
        return Map(self, lambda _: value)

    def void(self) -> 'Parser':
        return self.as_(None)

    def keep_left(self, that: 'Parser') -> 'Parser':
        return Product(self, that).map(lambda pair: pair[0])

    def keep_right(self, that: 'Parser') -> 'Parser':
        return Product(self, that).map(lambda pair: pair[1])


def _thunk(that):
    if isinstance(that, Parser):
        return lambda: that
    if callable(that):
        return that
    raise TypeError(f'Expected a Parser or a callable, got {that!r}')


class And(Parser):
    v_alias = 'combine'
    ch_aliases = ['left', 'right']

    def __init__(self, left, right, combine):
        super().__init__('and', combine, [left, right])


class Bind(Parser):
    v_alias = 'fn'
    ch_aliases = ['source']

    def __init__(self, source, fn):
        super().__init__('bind', fn, [source])


class Char(Parser):
    v_alias = 'value'

    def __init__(self, value):
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f'Expected a single character, got {value!r}')
        super().__init__('char', value, [])

    @property
    def description(self):
        return f'character {self.v}'


class CharWhere(Parser):
    v_aliases = ['predicate', 'description']

    def __init__(self, predicate, description):
        super().__init__('char_where', [predicate, description], [])


class Delayed(Parser):
    v_alias = 'thunk'

    def __init__(self, thunk):
        super().__init__('delayed', thunk, [])


class Fail(Parser):
    v_alias = 'reason'

    def __init__(self, reason):
        super().__init__('fail', reason, [])


class Literal(Parser):
    v_alias = 'value'

    def __init__(self, value):
        super().__init__('literal', value, [])


class Map(Parser):
    v_alias = 'fn'
    ch_aliases = ['source']

    def __init__(self, source, fn):
        super().__init__('map', fn, [source])


class Memoized(Parser):
    """Like `Delayed`, but the thunk is called at most once.

    Only the parser tree returned by the thunk is cached, never any
    parse results, so sharing one of these between evaluations is safe.
    """

    v_alias = 'thunk'

    def __init__(self, thunk):
        super().__init__('memoized', thunk, [])
        object.__setattr__(self, '_forced', None)

    def force(self) -> Parser:
        if self._forced is None:
            object.__setattr__(self, '_forced', self.v())
        return self._forced


class OrElse(Parser):
    v_alias = 'right'
    ch_aliases = ['left']

    def __init__(self, left, right):
        super().__init__('or_else', right, [left])


class Product(Parser):
    ch_aliases = ['left', 'right']

    def __init__(self, left, right):
        super().__init__('product', None, [left, right])


class Pure(Parser):
    v_alias = 'value'

    def __init__(self, value):
        super().__init__('pure', value, [])


class RecursiveBind(Parser):
    v_aliases = ['fn', 'seed']

    def __init__(self, fn, seed):
        super().__init__('recursive_bind', [fn, seed], [])


class Repeat(Parser):
    v_aliases = ['identity', 'combine']
    ch_aliases = ['source']

    def __init__(self, source, identity, combine):
        super().__init__('repeat', [identity, combine], [source])


class RepeatAccumulator(Parser):
    v_aliases = ['minimum', 'accumulator']
    ch_aliases = ['source']

    def __init__(self, source, minimum, accumulator):
        super().__init__(
            'repeat_accumulator', [minimum, accumulator], [source]
        )


class RepeatBetween(Parser):
    v_aliases = ['minimum', 'maximum', 'identity', 'combine']
    ch_aliases = ['source']

    def __init__(self, source, minimum, maximum, identity, combine):
        super().__init__(
            'repeat_between', [minimum, maximum, identity, combine], [source]
        )


class SucceedIdentity(Parser):
    v_alias = 'identity'

    def __init__(self, identity):
        super().__init__('identity', identity, [])


def literal(value: str) -> Parser:
    return Literal(value)


def char(value: str) -> Parser:
    return Char(value)


def char_where(
    predicate: Callable[[str], bool],
    description: str = 'a character matching the predicate',
) -> Parser:
    """Matches any one character for which `predicate` returns True.

    `description` is used in failure messages, as in
    "Input did not contain <description> at index 3".
    """
    return CharWhere(predicate, description)


def pure(value: Any) -> Parser:
    return Pure(value)


def fail(reason: str = 'This parser always fails') -> Parser:
    return Fail(reason)


def identity(value: Any) -> Parser:
    return SucceedIdentity(value)


def delay(thunk: Thunk) -> Parser:
    return Delayed(thunk)


def memoize(thunk: Thunk) -> Parser:
    return Memoized(thunk)


def recursive_bind(seed: Any, fn: Callable[[Any], Parser]) -> Parser:
    """Repeatedly binds `fn` without growing the call stack.

    `fn(seed)` must return a parser producing either `Left(next_seed)`,
    to run `fn` again from where that parser stopped, or `Right(value)`,
    to finish with `value`.
    """
    return RecursiveBind(fn, seed)


def char_in(first: str, *rest: str) -> Parser:
    parser = char(first)
    for c in rest:
        parser = parser.or_else(char(c))
    return parser


def string_in(first: str, *rest: str) -> Parser:
    parser = literal(first)
    for s in rest:
        parser = parser.or_else(literal(s))
    return parser


def tupled(first: Parser, *rest: Parser) -> Parser:
    """Runs each parser in turn, producing a tuple of their values."""
    parser = first.map(lambda v: (v,))
    for p in rest:
        parser = parser.product(p).map(lambda pair: pair[0] + (pair[1],))
    return parser


def map_n(fn: Callable[..., Any], first: Parser, *rest: Parser) -> Parser:
    return tupled(first, *rest).map(lambda vals: fn(*vals))
