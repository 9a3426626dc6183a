"""Compression of JSON-like values into a value table and back."""

import re

from compress_json.config import CONFIG
from compress_json.encode import decode_bool, decode_key, decode_num, decode_str
from compress_json.memory import make_memory

Compressed = tuple[list[str], str]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_UINT_MAX = 2**64 - 1


def compress(o) -> Compressed:
    """Compress a JSON-like value into ``(values, root_key)``."""
    mem = make_memory(CONFIG)
    root = mem.add(o)
    return mem.values(), root


def decompress(c: Compressed):
    """Rebuild the value from its compressed ``(values, root_key)`` form."""
    values, root = c
    return decode(values, root)


def decode(values: list[str], key: str):
    """Decode the value that ``key`` refers to in ``values``."""
    if key in ("", "_"):
        return None
    index = decode_key(key)
    try:
        encoded = values[index]
    except IndexError:
        raise ValueError(f"key {key!r} refers past the end of the value table") from None
    if encoded.startswith("b|"):
        return decode_bool(encoded)
    if encoded.startswith("o|"):
        return _decode_object(values, encoded)
    if encoded.startswith("n|"):
        return _decode_number(encoded)
    if encoded.startswith("a|"):
        return _decode_array(values, encoded)
    return decode_str(encoded)


def _decode_number(encoded: str):
    text = encoded[2:]
    if _INTEGER.fullmatch(text):
        number = int(text)
        if _INT_MIN <= number <= _UINT_MAX:
            return number
    number = decode_num(encoded)
    if number != number or number in (float("inf"), float("-inf")):
        raise ValueError(f"invalid number: {encoded!r}")
    return number


def _decode_object(values: list[str], encoded: str) -> dict:
    if encoded == "o|":
        return {}
    _, schema_key, *parts = encoded.split("|")
    schema = decode(values, schema_key)
    if isinstance(schema, str):
        names = [schema]
    elif isinstance(schema, list):
        for name in schema:
            if not isinstance(name, str):
                raise ValueError(f"invalid key type in object schema: {name!r}")
        names = schema
    else:
        raise ValueError(f"invalid object schema: {schema!r}")
    if len(parts) > len(names):
        raise ValueError(f"object {encoded!r} has more values than keys")
    return {name: decode(values, part) for name, part in zip(names, parts)}


def _decode_array(values: list[str], encoded: str) -> list:
    if encoded == "a|":
        return []
    return [decode(values, part) for part in encoded.split("|")[1:]]