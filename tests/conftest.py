"""Configurazione pytest e fixtures condivise."""
from __future__ import annotations

from pathlib import Path
from typing import List

import pytest


@pytest.fixture
def sample_grid() -> List[List[str]]:
    """Griglia minima: header A,B e due righe di dati."""
    return [["A", "B"], ["1", "x"], ["2", "y"]]


@pytest.fixture
def mixed_grid() -> List[List[str]]:
    """Griglia con celle vuote e non numeriche."""
    return [
        ["Test1", "Test2", "Flag"],
        ["1", "a", "true"],
        ["x", "", "false"],
        ["3", "c", ""],
        ["", "d", "0"],
    ]


@pytest.fixture
def write_csv(tmp_path: Path):
    """Scrive un file CSV temporaneo e ne restituisce il path."""

    def _write(content: str, name: str = "data.csv", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path

    return _write

