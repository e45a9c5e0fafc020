from __future__ import annotations

from dataclasses import replace

import pandas as pd

from .views import RowCol, Value


def is_present(value: Value) -> bool:
    """False per None, NA, stringa vuota e valori non uguali a se stessi (NaN)."""
    if value is None or value is pd.NA:
        return False
    if isinstance(value, str):
        return value != ""
    return value == value


def choose(view: RowCol) -> RowCol:
    """Rimuove i valori assenti mantenendo l'ordine; header invariato."""
    return replace(view, values=tuple(v for v in view.values if is_present(v)))
