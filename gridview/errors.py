"""
Gerarchia delle eccezioni di gridview.

Gli errori di I/O non sono ridefiniti: FileNotFoundError/OSError risalgono
così come sono al chiamante.
"""

from __future__ import annotations


class GridError(Exception):
    """Eccezione base per gli errori della libreria."""
    pass


class ParseError(GridError, ValueError):
    """Testo delimitato malformato (riportato dal parser esterno)."""
    pass


class ShapeError(GridError, ValueError):
    """Griglia vuota (senza header) o con righe di lunghezza diversa."""
    pass


class NotFoundError(GridError, LookupError):
    """Indice di riga/colonna o nome di colonna inesistente."""
    pass


class ConfigError(GridError, ValueError):
    """Configurazione non valida: converter sconosciuto o opzioni di caricamento errate."""
    pass
