"""Test per gridview/accessors.py - proiezioni finali delle view."""
from __future__ import annotations

import logging

import pandas as pd

from gridview.accessors import header, tap, to_series, values
from gridview.filters import choose
from gridview.views import Column, Row


class TestProjections:
    """Test per values() e header()."""

    def test_column_projections(self):
        column = Column(header="A", values=("1", "2"))

        assert values(column) == ["1", "2"]
        assert header(column) == "A"

    def test_row_projections(self):
        row = Row(header=("A", "B"), values=("2", "y"))

        assert values(row) == ["2", "y"]
        assert header(row) == ["A", "B"]

    def test_values_returns_a_copy(self):
        column = Column(header="A", values=("1",))

        out = values(column)
        out.append("2")

        assert column.values == ("1",)


class TestTap:
    """Test per tap()."""

    def test_returns_same_view(self):
        column = Column(header="A", values=("1",))

        assert tap(column) is column

    def test_logs_view(self, caplog):
        caplog.set_level(logging.INFO, logger="gridview")
        tap(Column(header="Test1", values=(1.0, 3.0)))

        records = [r for r in caplog.records if r.name == "gridview.accessors"]
        assert records
        assert records[-1].levelno == logging.INFO
        assert "Test1" in records[-1].getMessage()


class TestToSeries:
    """Test per to_series()."""

    def test_column_series(self):
        series = to_series(Column(header="A", values=(1.0, 2.0)))

        assert isinstance(series, pd.Series)
        assert series.name == "A"
        assert series.tolist() == [1.0, 2.0]

    def test_row_series_indexed_by_header(self):
        series = to_series(Row(header=("A", "B"), values=("2", "y")))

        assert list(series.index) == ["A", "B"]
        assert series["B"] == "y"

    def test_filtered_row_uses_positional_index(self):
        row = choose(Row(header=("A", "B"), values=("", "y")))

        series = to_series(row)

        assert series.tolist() == ["y"]
        assert list(series.index) == [0]
