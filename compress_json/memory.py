"""The value table that compression fills, with de-duplication of values and schemas."""

import math

from compress_json.config import CONFIG, Config, throw_unknown_data_type, throw_unsupported_data
from compress_json.encode import encode_bool, encode_num, encode_str
from compress_json.number import int_to_s


class Memory:
    """Accumulates encoded values, giving each distinct one a base-62 key."""

    def __init__(self, config: Config | None = None):
        self.config = config if config is not None else CONFIG
        self._store: list[str] = []
        self._value_cache: dict[str, str] = {}
        self._schema_cache: dict[tuple[str, ...], str] = {}

    def values(self) -> list[str]:
        """Return a copy of the value table."""
        return list(self._store)

    def add(self, value) -> str:
        """Add a JSON-like value and return the key that refers to it."""
        if value is None:
            return ""
        if isinstance(value, bool):
            return self._intern(encode_bool(value))
        if isinstance(value, (int, float)):
            return self._add_number(value)
        if isinstance(value, str):
            return self._intern(encode_str(value))
        if isinstance(value, (list, tuple)):
            return self._add_array(value)
        if isinstance(value, dict):
            return self._add_object(value)
        throw_unknown_data_type()

    def _intern(self, encoded: str) -> str:
        key = self._value_cache.get(encoded)
        if key is None:
            key = int_to_s(len(self._store))
            self._store.append(encoded)
            self._value_cache[encoded] = key
        return key

    def _add_number(self, value) -> str:
        try:
            number = float(value)
        except OverflowError:
            number = math.inf if value > 0 else -math.inf
        if math.isnan(number):
            if self.config.error_on_nan:
                throw_unsupported_data("[number NaN]")
            return ""
        if math.isinf(number):
            if self.config.error_on_infinite:
                throw_unsupported_data("[number Infinity]")
            return ""
        return self._intern(encode_num(number))

    def _add_array(self, items) -> str:
        if not items:
            return self._intern("a|")
        keys = ("_" if item is None else self.add(item) for item in items)
        return self._intern("a|" + "|".join(keys))

    def _schema_key(self, keys: list[str]) -> str:
        schema = tuple(keys)
        key = self._schema_cache.get(schema)
        if key is None:
            key = self.add(list(schema))
            self._schema_cache[schema] = key
        return key

    def _add_object(self, obj: dict) -> str:
        if not obj:
            return self._intern("o|")
        keys = list(obj)
        for name in keys:
            if not isinstance(name, str):
                throw_unsupported_data(f"[object key {type(name).__name__}]")
        if self.config.sort_key:
            keys.sort()
        parts = [self._schema_key(keys)]
        parts.extend(self.add(obj[name]) for name in keys)
        return self._intern("o|" + "|".join(parts))


def make_memory(config: Config | None = None) -> Memory:
    """Create an empty value table."""
    return Memory(config)


def mem_to_values(mem: Memory) -> list[str]:
    """Return a copy of the value table held by ``mem``."""
    return mem.values()


def add_value(mem: Memory, o) -> str:
    """Add ``o`` to ``mem`` and return its key."""
    return mem.add(o)