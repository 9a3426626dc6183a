"""Helpers for removing null entries from mappings."""


def trim_undefined(obj: dict) -> None:
    """Remove, in place, the keys of ``obj`` whose value is None."""
    for key in [key for key, value in obj.items() if value is None]:
        del obj[key]


def trim_undefined_recursively(obj: dict) -> None:
    """Remove, in place, None-valued keys from ``obj`` and the mappings nested in it."""
    seen: set[int] = set()

    def visit(mapping: dict) -> None:
        seen.add(id(mapping))
        trim_undefined(mapping)
        for value in mapping.values():
            if isinstance(value, dict) and id(value) not in seen:
                visit(value)

    visit(obj)