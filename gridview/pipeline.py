from __future__ import annotations

from typing import Any, Callable

from .logger import LogManager

log = LogManager("pipeline").get_logger()


def pipe(value: Any, *steps: Callable[[Any], Any]) -> Any:
    """
    Applica in ordine le funzioni a un argomento e restituisce l'ultimo risultato.

    Example:
        >>> pipe(grid, to_columns, by_name("A"), as_numbers, choose, values)
        [1.0, 2.0]
    """
    result = value
    for step in steps:
        log.debug("pipe -> %s", getattr(step, "__name__", repr(step)))
        result = step(result)
    return result
