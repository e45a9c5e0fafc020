from __future__ import annotations

from typing import List, Union

import pandas as pd

from .logger import LogManager
from .views import Column, Row, RowCol, Value

log = LogManager("accessors").get_logger()


def values(view: RowCol) -> List[Value]:
    return list(view.values)


def header(view: RowCol) -> Union[str, List[str]]:
    """Stringa per una Column, lista di stringhe per una Row."""
    if isinstance(view, Row):
        return list(view.header)
    if isinstance(view, Column):
        return view.header
    raise TypeError(f"View non supportata: {type(view).__name__}")


def tap(view: RowCol) -> RowCol:
    """Registra la view nel log e la restituisce invariata."""
    log.info("%s %r: %r", view.kind, view.header, view.values)
    return view


def to_series(view: RowCol) -> pd.Series:
    """
    Converte la view in una pandas Series:
    - Column -> Series con name=header,
    - Row    -> Series indicizzata dall'header.

    Dopo choose() una Row può avere meno valori dell'header: in quel caso
    l'indice è posizionale.
    """
    if isinstance(view, Column):
        return pd.Series(list(view.values), name=view.header, dtype=object)
    if isinstance(view, Row):
        index = list(view.header) if len(view.header) == len(view.values) else None
        return pd.Series(list(view.values), index=index, dtype=object)
    raise TypeError(f"View non supportata: {type(view).__name__}")
