"""
gridview: caricamento di file delimitati e viste per righe/colonne.

Flusso tipico: load -> to_rows/to_columns -> selettore -> coerce -> choose -> values.
"""

from .accessors import header, tap, to_series, values
from .coercion import (
    NAN,
    as_booleans,
    as_integers,
    as_numbers,
    as_strings,
    coerce,
    coercer,
    register_converter,
    resolve_converter,
    to_boolean,
    to_integer,
    to_number,
    to_string,
)
from .errors import ConfigError, GridError, NotFoundError, ParseError, ShapeError
from .filters import choose, is_present
from .loader import Grid, load, load_async, parse_text
from .options import LoadOptions
from .pipeline import pipe
from .selectors import by_index, by_name, column_by_index, column_by_name, row_by_index
from .views import Column, Row, RowCol, Value, View, to_columns, to_rows, validate_grid

__all__ = [
    "Column",
    "ConfigError",
    "Grid",
    "GridError",
    "LoadOptions",
    "NAN",
    "NotFoundError",
    "ParseError",
    "Row",
    "RowCol",
    "ShapeError",
    "Value",
    "View",
    "as_booleans",
    "as_integers",
    "as_numbers",
    "as_strings",
    "by_index",
    "by_name",
    "choose",
    "coerce",
    "coercer",
    "column_by_index",
    "column_by_name",
    "header",
    "is_present",
    "load",
    "load_async",
    "parse_text",
    "pipe",
    "register_converter",
    "resolve_converter",
    "row_by_index",
    "tap",
    "to_boolean",
    "to_columns",
    "to_integer",
    "to_number",
    "to_rows",
    "to_series",
    "to_string",
    "validate_grid",
    "values",
]
