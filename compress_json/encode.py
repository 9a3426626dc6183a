"""Encoding of primitive values into the tagged strings of the value table."""

import math
from decimal import Decimal

from compress_json.number import s_to_int

_RESERVED_PREFIXES = frozenset({"b|", "o|", "n|", "a|", "s|"})
_BOOL_CHARS = ("F", "T")


def encode_num(num: float) -> str:
    """Encode a number as ``n|<decimal>`` in plain (non-exponent) notation."""
    value = float(num)
    if math.isnan(value):
        return "n|NaN"
    if math.isinf(value):
        return "n|inf" if value > 0 else "n|-inf"
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return f"n|{text}"


def decode_num(s: str) -> float:
    """Decode a number string, with or without its ``n|`` prefix."""
    text = s.removeprefix("n|")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"invalid number: {s!r}") from None


def decode_key(key: str) -> int:
    """Decode a reference key into an index of the value table."""
    return s_to_int(key)


def encode_bool(b: bool) -> str:
    """Encode a boolean as ``b|T`` or ``b|F``."""
    return f"b|{bool_to_s(b)}"


def decode_bool(s: str) -> bool:
    """Decode an encoded boolean; any other non-empty string counts as true."""
    if s == "b|T":
        return True
    if s == "b|F":
        return False
    return bool(s)


def encode_str(s: str) -> str:
    """Encode a string, escaping it with ``s|`` when it starts with a type tag."""
    if s[:2] in _RESERVED_PREFIXES:
        return f"s|{s}"
    return s


def decode_str(s: str) -> str:
    """Decode a string, removing an ``s|`` escape if present."""
    return s.removeprefix("s|")


def bool_to_s(b: bool) -> str:
    """Render a boolean as ``T`` or ``F``."""
    return _BOOL_CHARS[bool(b)]


def s_to_bool(s: str) -> bool:
    """Parse ``T`` or ``F``; any other non-empty string counts as true."""
    if s == "T":
        return True
    if s == "F":
        return False
    return bool(s)