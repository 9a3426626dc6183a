# compress-json

Store JSON data in a compact form. Repeated values and repeated object
shapes are stored once. A compressed document is a list of strings plus
a root key. It decompresses back to the original value.

## Installation

```
pip install .
```

## Usage

```python
from compress_json.core import compress, decompress

data = {
    "a": 1,
    "b": [True, False, None],
    "c": "string",
    "d": {"nested": [1, 2, 3]},
}

values, root = compress(data)
assert decompress((values, root)) == data
```

`compress` accepts `None`, booleans, integers, floats, strings, lists or
tuples, and dicts with string keys. It returns a `(values, root)` pair
of plain strings. You can write that pair with `json.dumps` and read it
back with `json.loads`. A tuple comes back as a list.

`compress_json.core.decode(values, key)` decodes the single entry that
`key` refers to. The keys `""` and `"_"` decode to `None`. A key that
points past the end of `values` raises `ValueError`. So does an
ill-formed number or object schema.

### How values are encoded

Each entry in `values` has one of these forms:

- `b|T` or `b|F` is a boolean.
- `n|<number>` is a number. It is written in plain decimal notation, with no exponent.
- `a|k1|k2|...` is an array. Its items are keys into `values`, and `_` stands for `null`. An empty array is `a|`.
- `o|<schema>|k1|k2|...` is an object. `<schema>` is the key of an array that holds the field names. An empty object is `o|`.
- Anything else is a string. A string that starts with `b|`, `o|`, `n|`, `a|` or `s|` is stored with an extra `s|` in front.

Keys are indexes into `values`, written in base 62 (`0-9A-Za-z`).
`compress_json.number.int_to_s` and `s_to_int` convert between keys and
indexes.

Numbers are stored through a float. When decoded, an integer-valued
entry inside the signed and unsigned 64-bit range comes back as `int`.
Any other entry comes back as `float`.

### Null values

`null` values in objects are stored by default. To drop them before
compressing, use the helpers in `compress_json.helpers`:

```python
from compress_json.helpers import trim_undefined_recursively

doc = {"a": 1, "b": None, "c": {"d": None}}
trim_undefined_recursively(doc)
assert doc == {"a": 1, "c": {}}
```

`trim_undefined` removes them from the top level only. Both helpers
change the dict in place.

### Configuration

`compress_json.config.Config` is a frozen dataclass with three options:

- `sort_key` sorts object keys when a schema is built.
- `error_on_nan` raises an error on NaN.
- `error_on_infinite` raises an error on infinite numbers.

All three default to `False`. `compress` always uses these defaults.
To use other settings, pass a `Config` to
`compress_json.memory.make_memory` (or to `Memory`). Then add values
with `Memory.add`, and read the stored strings with `Memory.values`.

```python
from compress_json.config import Config
from compress_json.core import decompress
from compress_json.memory import make_memory

mem = make_memory(Config(sort_key=True))
root = mem.add({"b": 1, "a": 2})
assert mem.values() == ["a", "b", "a|0|1", "n|2", "n|1", "o|2|3|4"]
assert decompress((mem.values(), root)) == {"a": 2, "b": 1}
```

Unless an error is requested, NaN and infinite numbers are stored as
`null`. When an error is requested, and for values of an unsupported
type or dict keys that are not strings,
`compress_json.config.UnsupportedDataError` is raised. It is a subclass
of `TypeError`.

## What this package does not do

This is a library only. It has no command-line tool, and it does not
read or write files. Serialise the `(values, root)` pair yourself,
for example with the `json` module.

## Running the tests

```
pip install ".[test]"
pytest
```