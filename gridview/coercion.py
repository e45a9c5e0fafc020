"""
Coercion Engine: conversione dei valori di una View in un tipo scalare.

La conversione è permissiva: una cella non rappresentabile diventa il
sentinel NAN (mai uguale a se stesso) e non interrompe l'operazione.
Sarà choose() a rimuoverla.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Callable, Dict, Optional, Union

import numpy as np

from .errors import ConfigError
from .filters import is_present
from .logger import LogManager
from .views import RowCol, Value

log = LogManager("coercion").get_logger()

NAN = np.nan

# Prefisso numerico decimale: segno, cifre, frazione, esponente oppure Infinity
NUMBER_PREFIX_RE = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)
INTEGER_PREFIX_RE = re.compile(r"[+-]?\d+")

Converter = Callable[[str], Value]


def _as_text(value: object) -> str:
    return value if isinstance(value, str) else str(value)


def parse_number(text: str) -> Optional[float]:
    """Prefisso numerico iniziale come float, None se assente. '3.5kg' -> 3.5"""
    match = NUMBER_PREFIX_RE.match(_as_text(text).lstrip())
    if match is None:
        return None
    return float(match.group(0).replace("Infinity", "inf"))


def parse_integer(text: str) -> Optional[int]:
    """Prefisso intero in base 10, None se assente. '2.7' -> 2"""
    match = INTEGER_PREFIX_RE.match(_as_text(text).lstrip())
    if match is None:
        return None
    return int(match.group(0))


# ---------- Converter scalari ----------
def to_number(text: str) -> float:
    parsed = parse_number(text)
    return NAN if parsed is None else parsed


def to_integer(text: str) -> Union[int, float]:
    parsed = parse_integer(text)
    return NAN if parsed is None else parsed


def to_boolean(text: str) -> bool:
    """
    Verità della rappresentazione testuale: ogni stringa non vuota è True.

    Attenzione: anche "false" e "0" diventano True. La politica è volutamente
    lasca e non interpreta i letterali true/false.
    """
    return bool(_as_text(text))


def to_string(text: str) -> str:
    return _as_text(text)


_CONVERTERS: Dict[str, Converter] = {
    "number": to_number,
    "integer": to_integer,
    "boolean": to_boolean,
    "string": to_string,
}


def register_converter(name: str, func: Converter) -> None:
    """
    Registra un converter personalizzato.

    Deve essere una funzione totale da stringa a scalare (o sentinel NAN):
    non deve sollevare eccezioni su una singola cella.
    """
    if not name or not callable(func):
        raise ConfigError(f"Converter non valido per il nome {name!r}")
    _CONVERTERS[name] = func


def resolve_converter(converter: Union[str, Converter]) -> Converter:
    """Accetta un nome registrato o un converter registrato; altrimenti ConfigError."""
    if isinstance(converter, str):
        func = _CONVERTERS.get(converter)
        if func is not None:
            return func
    elif any(converter is func for func in _CONVERTERS.values()):
        return converter

    msg = f"Converter sconosciuto: {converter!r}. Disponibili: {sorted(_CONVERTERS)}"
    log.error(msg)
    raise ConfigError(msg)


def coerce(view: RowCol, converter: Union[str, Converter]) -> RowCol:
    """Nuova View dello stesso tipo, header invariato, valori convertiti."""
    func = resolve_converter(converter)
    converted = tuple(func(v) for v in view.values)

    failed = sum(1 for v in converted if not is_present(v))
    if failed:
        log.debug(
            "Coercion %s su %s %r: %d/%d celle vuote o non convertibili",
            getattr(func, "__name__", func),
            view.kind,
            view.header,
            failed,
            len(converted),
        )
    return replace(view, values=converted)


def coercer(converter: Union[str, Converter]) -> Callable[[RowCol], RowCol]:
    """Versione a un argomento di coerce(); il converter è validato subito."""
    func = resolve_converter(converter)
    return lambda view: coerce(view, func)


def as_numbers(view: RowCol) -> RowCol:
    return coerce(view, to_number)


def as_integers(view: RowCol) -> RowCol:
    return coerce(view, to_integer)


def as_booleans(view: RowCol) -> RowCol:
    return coerce(view, to_boolean)


def as_strings(view: RowCol) -> RowCol:
    return coerce(view, to_string)
