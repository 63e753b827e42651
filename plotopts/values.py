"""Typed option values and the text parsers behind them."""

from __future__ import annotations

import enum
import functools
import math
import re
from typing import Any, Callable, get_args, get_origin

from .errors import ArgumentIncorrectTypeError

LIST_DELIMITER = ","

_INTEGER_PATTERN = re.compile(r"(-)?(0x)?([0-9a-zA-Z]+)|((0x)?0)")
_TRUTHY_PATTERN = re.compile(r"(t|T)(rue)?|1")
_FALSY_PATTERN = re.compile(r"(f|F)(alse)?|0")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_WHITESPACE = " \t\n\r\f\v"
_HEX_DIGITS = "0123456789abcdef"


class IntKind(enum.Enum):
    """Fixed-width integer types, each with its bit width and signedness."""

    INT8 = (8, True)
    UINT8 = (8, False)
    INT16 = (16, True)
    UINT16 = (16, False)
    INT32 = (32, True)
    UINT32 = (32, False)
    INT64 = (64, True)
    UINT64 = (64, False)

    @property
    def bits(self) -> int:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    def parse(self, text: str) -> int:
        return parse_integer(text, self.bits, self.signed)


def parse_integer(text: str, bits: int = 64, signed: bool = True) -> int:
    """Parse a decimal or ``0x`` hexadecimal integer that fits the given type."""
    match = _INTEGER_PATTERN.fullmatch(text)
    if match is None:
        raise ArgumentIncorrectTypeError(text)
    if match.group(4):
        return 0

    negative = match.group(1) is not None
    base = 16 if match.group(2) else 10
    limit = (1 << bits) - 1

    result = 0
    for char in match.group(3):
        digit = _HEX_DIGITS.find(char.lower())
        if digit < 0 or digit >= base:
            raise ArgumentIncorrectTypeError(text)
        result = result * base + digit
        if result > limit:
            raise ArgumentIncorrectTypeError(text)

    if signed:
        bound = 1 << (bits - 1) if negative else (1 << (bits - 1)) - 1
        if result > bound:
            raise ArgumentIncorrectTypeError(text)
    elif negative:
        raise ArgumentIncorrectTypeError(text)

    return -result if negative else result


def parse_bool(text: str) -> bool:
    """Accept ``t``, ``true``, ``1`` and ``f``, ``false``, ``0`` (first letter in either case)."""
    if _TRUTHY_PATTERN.fullmatch(text):
        return True
    if _FALSY_PATTERN.fullmatch(text):
        return False
    raise ArgumentIncorrectTypeError(text)


def parse_char(text: str) -> str:
    """Accept exactly one character."""
    if len(text) != 1:
        raise ArgumentIncorrectTypeError(text)
    return text


def parse_float(text: str) -> float:
    """Read a number from the start of the text, skipping leading whitespace."""
    match = _FLOAT_PREFIX.match(text.lstrip(_WHITESPACE))
    if match is None:
        raise ArgumentIncorrectTypeError(text)
    number = float(match.group())
    if math.isinf(number):
        raise ArgumentIncorrectTypeError(text)
    return number


def parse_list(text: str, item_parser: Callable[[str], Any]) -> list:
    """Split on commas and parse every item; a trailing empty item is dropped."""
    tokens = text.split(LIST_DELIMITER)
    if tokens[-1] == "":
        tokens.pop()
    return [item_parser(token) for token in tokens]


def _identity(text: str) -> str:
    return text


class Value:
    """An option's type, its default and implicit texts, and its parsed result."""

    def __init__(
        self,
        parser: Callable[[str], Any],
        make_initial: Callable[[], Any] = lambda: None,
        *,
        container: bool = False,
        boolean: bool = False,
    ) -> None:
        self._parser = parser
        self._make_initial = make_initial
        self.is_container = container
        self.is_boolean = boolean
        self.has_default = boolean
        self.default_text = "false" if boolean else ""
        self.has_implicit = boolean
        self.implicit_text = "true" if boolean else ""
        self.result = make_initial()

    def parse(self, text: str) -> None:
        """Parse text into the result; containers accumulate."""
        parsed = self._parser(text)
        if self.is_container:
            self.result.extend(parsed)
        else:
            self.result = parsed

    def parse_default(self) -> None:
        """Parse the default text into the result."""
        self.parse(self.default_text)

    def default_value(self, value: str) -> Value:
        self.has_default = True
        self.default_text = value
        return self

    def implicit_value(self, value: str) -> Value:
        self.has_implicit = True
        self.implicit_text = value
        return self

    def no_implicit_value(self) -> Value:
        self.has_implicit = False
        return self

    def clone(self) -> Value:
        """A copy with the same settings and a fresh, unparsed result."""
        copy = Value(
            self._parser,
            self._make_initial,
            container=self.is_container,
            boolean=self.is_boolean,
        )
        copy.has_default = self.has_default
        copy.default_text = self.default_text
        copy.has_implicit = self.has_implicit
        copy.implicit_text = self.implicit_text
        return copy

    def __repr__(self) -> str:
        return (
            f"Value(result={self.result!r}, default={self.default_text!r}, "
            f"implicit={self.implicit_text!r})"
        )


def _scalar_parser(kind: Any) -> tuple[Callable[[str], Any], Callable[[], Any]]:
    if kind is bool:
        return parse_bool, bool
    if kind is str:
        return _identity, str
    if kind is int:
        return IntKind.INT64.parse, int
    if kind is float:
        return parse_float, float
    if isinstance(kind, IntKind):
        return kind.parse, int
    if isinstance(kind, type):
        raise TypeError(f"unsupported value type: {kind!r}")
    if callable(kind):
        return kind, lambda: None
    raise TypeError(f"unsupported value type: {kind!r}")


def value(kind: Any = bool) -> Value:
    """Create a value for ``bool``, ``str``, ``int``, ``float``, an ``IntKind``,
    ``list[...]`` of any of these, or a custom parsing function."""
    if get_origin(kind) is list:
        args = get_args(kind)
        if len(args) != 1:
            raise TypeError(f"unsupported value type: {kind!r}")
        item_parser, _ = _scalar_parser(args[0])
        return Value(
            functools.partial(parse_list, item_parser=item_parser),
            list,
            container=True,
        )
    parser, make_initial = _scalar_parser(kind)
    return Value(parser, make_initial, boolean=kind is bool)