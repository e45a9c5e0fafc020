"""Test per gridview/options.py - validazione delle opzioni di caricamento."""
from __future__ import annotations

import pytest

from gridview.errors import ConfigError
from gridview.options import DEFAULT_SEPARATOR, LoadOptions


def test_defaults():
    options = LoadOptions()

    assert options.separator == DEFAULT_SEPARATOR == ","
    assert options.skip_header is False
    assert options.strip is True
    assert options.validate() is options


@pytest.mark.parametrize("separator", ["", ";;", '"', "\n", 1])
def test_invalid_separator(separator):
    with pytest.raises(ConfigError):
        LoadOptions(separator=separator).validate()


def test_blank_encoding():
    with pytest.raises(ConfigError):
        LoadOptions(encoding=" ").validate()


def test_read_csv_kwargs_keep_strings():
    kwargs = LoadOptions(separator=";", skip_header=True).read_csv_kwargs()

    assert kwargs["sep"] == ";"
    assert kwargs["header"] is None
    assert kwargs["dtype"] is str
    assert kwargs["keep_default_na"] is False
    assert "na_filter" not in kwargs
    assert kwargs["skiprows"] == 1


def test_to_dict():
    assert LoadOptions(separator="|").to_dict() == {
        "skip_header": False,
        "separator": "|",
        "strip": True,
        "encoding": None,
    }
