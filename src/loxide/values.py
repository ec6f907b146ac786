"""Runtime values — the closed set of types an expression can evaluate to."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Number:
    """64-bit float."""

    value: float


@dataclass(frozen=True, slots=True)
class Text:
    """String value."""

    value: str


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool


@dataclass(frozen=True, slots=True)
class Nil:
    """The absence of a value. Use the NIL singleton."""


NIL = Nil()
TRUE = Boolean(True)
FALSE = Boolean(False)

Value = Number | Text | Boolean | Nil


def boolean(flag: bool) -> Boolean:
    return TRUE if flag else FALSE


def is_truthy(value: Value) -> bool:
    """Nil and false are falsy; everything else, including 0 and "", is truthy."""
    if isinstance(value, Nil):
        return False
    if isinstance(value, Boolean):
        return value.value
    return True


def values_equal(a: Value, b: Value) -> bool:
    """Type-sensitive equality. Values of different types are never equal."""
    if isinstance(a, Nil) or isinstance(b, Nil):
        return isinstance(a, Nil) and isinstance(b, Nil)
    if type(a) is not type(b):
        return False
    # Compare payloads directly so NaN != NaN holds for numbers
    return a.value == b.value


def stringify(value: Value | None) -> str:
    """Render a value the way the shell prints results."""
    if value is None or isinstance(value, Nil):
        return "nil"
    if isinstance(value, Boolean):
        return "true" if value.value else "false"
    if isinstance(value, Number):
        return format_number(value.value)
    return value.value


def format_number(n: float) -> str:
    """Shortest round-trip decimal form, no exponent, no trailing '.0'."""
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    text = repr(n)
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text
