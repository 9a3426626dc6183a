"""Conversion between non-negative integers and base-62 reference keys."""

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)

_DIGITS = {char: index for index, char in enumerate(ALPHABET)}


def s_to_int(s: str) -> int:
    """Parse a base-62 key into the integer it denotes."""
    acc = 0
    for char in s:
        try:
            digit = _DIGITS[char]
        except KeyError:
            raise ValueError(f"invalid character in key: {char!r}") from None
        acc = acc * BASE + digit
    return acc


def int_to_s(value: int) -> str:
    """Render a non-negative integer as a base-62 key."""
    if value < 0:
        raise ValueError(f"key index must be non-negative, got {value}")
    if value == 0:
        return ALPHABET[0]
    digits = []
    while value:
        value, digit = divmod(value, BASE)
        digits.append(ALPHABET[digit])
    return "".join(reversed(digits))