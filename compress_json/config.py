"""Compression settings and the error raised for unsupported data."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Options that steer how values are compressed."""

    sort_key: bool = False
    error_on_nan: bool = False
    error_on_infinite: bool = False


CONFIG = Config()


class UnsupportedDataError(TypeError):
    """Raised when a value cannot be represented in compressed form."""


def throw_unknown_data_type():
    """Raise the error for a value of an unsupported type."""
    raise UnsupportedDataError("unsupported data type")


def throw_unsupported_data(name: str):
    """Raise the error for an unsupported value described by ``name``."""
    raise UnsupportedDataError(f"unsupported data type: {name}")