import dataclasses

import pytest

from compress_json.config import (
    CONFIG,
    Config,
    UnsupportedDataError,
    throw_unknown_data_type,
    throw_unsupported_data,
)


def test_defaults_are_all_off():
    assert Config() == Config(sort_key=False, error_on_nan=False, error_on_infinite=False)
    assert CONFIG == Config()


def test_single_field_can_be_set():
    changed = Config(sort_key=True)
    assert changed.sort_key is True
    assert changed.error_on_nan is False
    assert changed.error_on_infinite is False
    assert changed != CONFIG


def test_config_is_immutable():
    config = Config(error_on_nan=True)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.sort_key = True  # type: ignore[misc]
    assert config.sort_key is False


def test_unknown_data_type_message():
    with pytest.raises(UnsupportedDataError, match="^unsupported data type$"):
        throw_unknown_data_type()


def test_unsupported_data_names_value():
    with pytest.raises(UnsupportedDataError, match=r"unsupported data type: \[number NaN\]"):
        throw_unsupported_data("[number NaN]")