"""
View Builder: orientamento per righe o per colonne di una griglia.

Row e Column sono le due sole varianti di View. Il codice a valle distingue
con isinstance (o con l'attributo kind), mai controllando la forma dell'header.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Sequence, Tuple, Union

from .errors import ShapeError
from .logger import LogManager

log = LogManager("views").get_logger()

Value = Union[str, float, int, bool]
Grid = Sequence[Sequence[str]]


@dataclass(frozen=True)
class View:
    values: Tuple[Value, ...]

    kind: ClassVar[str] = "view"

    def __post_init__(self) -> None:
        if type(self) is View:
            raise TypeError("View è astratta: istanziare Row o Column")

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class Row(View):
    """Un record orizzontale: header condiviso + una riga di dati."""

    header: Tuple[str, ...] = ()

    kind: ClassVar[str] = "row"


@dataclass(frozen=True)
class Column(View):
    """Un campo verticale: una cella di header + tutti i valori sottostanti."""

    header: str = ""

    kind: ClassVar[str] = "column"


RowCol = Union[Row, Column]


def validate_grid(grid: Grid) -> int:
    """
    Controlla che la griglia abbia un header e sia rettangolare.

    Returns:
        Numero di colonne.

    Raises:
        ShapeError: griglia vuota o righe di lunghezza diversa
    """
    if not grid:
        msg = "Griglia vuota: manca la riga di header"
        log.error(msg)
        raise ShapeError(msg)

    width = len(grid[0])
    ragged = [i for i, row in enumerate(grid) if len(row) != width]
    if ragged:
        msg = f"Griglia irregolare: {len(ragged)} righe non hanno {width} celle (es. {ragged[:5]})"
        log.error(msg)
        raise ShapeError(msg)
    return width


def to_rows(grid: Grid) -> List[Row]:
    validate_grid(grid)
    head = tuple(grid[0])
    return [Row(header=head, values=tuple(row)) for row in grid[1:]]


def to_columns(grid: Grid) -> List[Column]:
    width = validate_grid(grid)
    data = grid[1:]
    return [
        Column(header=grid[0][i], values=tuple(row[i] for row in data))
        for i in range(width)
    ]
