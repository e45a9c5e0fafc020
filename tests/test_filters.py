"""Test per gridview/filters.py - rimozione dei valori assenti."""
from __future__ import annotations

import pandas as pd
import pytest

from gridview.coercion import NAN, as_booleans, as_numbers
from gridview.filters import choose, is_present
from gridview.views import Column, Row


class TestIsPresent:
    """Test per is_present()."""

    @pytest.mark.parametrize("value", [None, "", NAN, float("nan"), pd.NA])
    def test_absent_values(self, value):
        assert is_present(value) is False

    @pytest.mark.parametrize("value", ["x", " ", 0, 0.0, False, True, "nan"])
    def test_present_values(self, value):
        assert is_present(value) is True


class TestChoose:
    """Test per choose()."""

    def test_removes_empty_strings(self):
        column = Column(header="B", values=("x", "", "y"))

        assert choose(column) == Column(header="B", values=("x", "y"))

    def test_number_coercion_then_choose(self):
        """Restano solo le celle numeriche, nell'ordine originale."""
        column = Column(header="Test1", values=("1", "x", "3", ""))

        result = choose(as_numbers(column))

        assert result.values == (1.0, 3.0)
        assert result.header == "Test1"

    def test_false_survives(self):
        column = Column(header="Flag", values=("a", ""))

        assert choose(as_booleans(column)).values == (True, False)

    def test_idempotent(self, mixed_grid):
        column = as_numbers(Column(header="Test1", values=tuple(r[0] for r in mixed_grid[1:])))

        once = choose(column)

        assert choose(once) == once

    def test_row_keeps_full_header(self):
        row = Row(header=("A", "B", "C"), values=("1", "", "3"))

        result = choose(row)

        assert result.header == ("A", "B", "C")
        assert result.values == ("1", "3")

    def test_does_not_mutate_input(self):
        column = Column(header="B", values=("x", ""))

        choose(column)

        assert column.values == ("x", "")

    def test_nothing_to_remove(self):
        column = Column(header="A", values=("1", "2"))

        assert choose(column) == column
