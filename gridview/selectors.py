from __future__ import annotations

from typing import Callable, Sequence

from .errors import NotFoundError
from .logger import LogManager
from .views import Column, Row

log = LogManager("selectors").get_logger()


def _check_index(index: int, size: int, what: str) -> None:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < size:
        msg = f"{what} {index!r} non trovata (disponibili: 0..{size - 1})"
        log.error(msg)
        raise NotFoundError(msg)


def row_by_index(rows: Sequence[Row], index: int) -> Row:
    """Restituisce rows[index]; gli indici negativi non sono ammessi."""
    _check_index(index, len(rows), "Riga")
    return rows[index]


def column_by_index(columns: Sequence[Column], index: int) -> Column:
    _check_index(index, len(columns), "Colonna")
    return columns[index]


def column_by_name(columns: Sequence[Column], name: str) -> Column:
    """
    Prima colonna con header identico a name (confronto esatto, case-sensitive).

    Raises:
        NotFoundError: nessuna colonna con quel nome
    """
    for column in columns:
        if column.header == name:
            return column

    available = [c.header for c in columns]
    msg = f"Colonna {name!r} non trovata. Colonne disponibili: {available}"
    log.error(msg)
    raise NotFoundError(msg)


# ---------- Varianti a un argomento, per pipe() ----------
def by_index(index: int) -> Callable[[Sequence[Row]], Row]:
    return lambda rows: row_by_index(rows, index)


def by_name(name: str) -> Callable[[Sequence[Column]], Column]:
    return lambda columns: column_by_name(columns, name)
