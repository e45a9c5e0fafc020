"""
Opzioni di caricamento dei file delimitati.

Nessuna variabile d'ambiente né file di configurazione: i default sono
costanti di modulo, sovrascrivibili per singola chiamata tramite LoadOptions.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Optional, Tuple

from .errors import ConfigError

DEFAULT_SEPARATOR = ","
DEFAULT_ENCODING = "utf-8"
SUPPORTED_SEPARATORS: Tuple[str, ...] = (",", ";", "\t", "|")

# Caratteri che il parser riserva a quoting e fine riga
_RESERVED_SEPARATORS = {'"', "\n", "\r"}


@dataclass(frozen=True)
class LoadOptions:
    skip_header: bool = False
    separator: Optional[str] = DEFAULT_SEPARATOR
    strip: bool = True
    encoding: Optional[str] = None

    def validate(self) -> "LoadOptions":
        """
        Verifica le opzioni e restituisce self per permettere il chaining.

        separator/encoding a None significano "da rilevare" (vedi sniffer).

        Raises:
            ConfigError: se il separatore non è un singolo carattere utilizzabile
        """
        sep = self.separator
        if sep is not None:
            if not isinstance(sep, str) or len(sep) != 1:
                raise ConfigError(
                    f"Il separatore deve essere un singolo carattere, ricevuto {sep!r}"
                )
            if sep in _RESERVED_SEPARATORS:
                raise ConfigError(f"Separatore riservato non ammesso: {sep!r}")
        if self.encoding is not None and not str(self.encoding).strip():
            raise ConfigError("Encoding vuoto: usare None per il rilevamento automatico")
        return self

    def read_csv_kwargs(self) -> Dict[str, object]:
        """Argomenti per pandas.read_csv: tutte le celle restano stringhe."""
        if self.separator is None:
            raise ConfigError("Il separatore va risolto prima della lettura")
        return {
            "sep": self.separator,
            "header": None,
            "dtype": str,
            # Solo i campi mancanti diventano NaN; i campi vuoti restano ""
            "keep_default_na": False,
            "skip_blank_lines": True,
            "skiprows": 1 if self.skip_header else None,
        }

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)
