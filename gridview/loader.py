from __future__ import annotations

import asyncio
import io
import os
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .errors import ParseError, ShapeError
from .logger import LogManager
from .options import DEFAULT_SEPARATOR, LoadOptions
from .sniffer import detect_encoding, detect_separator

log = LogManager("loader").get_logger()

Grid = List[List[str]]


def load(
    path: str | os.PathLike,
    skip_header: bool = False,
    separator: Optional[str] = DEFAULT_SEPARATOR,
    encoding: Optional[str] = None,
    strip: bool = True,
) -> Grid:
    """
    Legge l'intero file e lo converte in una griglia di stringhe.

    - skip_header: se True la prima riga viene scartata dal parser.
    - separator: None attiva il rilevamento automatico (sniffer).
    - encoding: None attiva il rilevamento tramite BOM.
    - strip: rimuove gli spazi attorno a ogni cella.

    Un file vuoto produce una griglia vuota; sarà il View Builder a rifiutarla.
    """
    options = LoadOptions(
        skip_header=skip_header,
        separator=separator,
        strip=strip,
        encoding=encoding,
    ).validate()

    file_path = Path(path)
    if not file_path.is_file():
        msg = f"File non trovato: {file_path}"
        log.error(msg)
        raise FileNotFoundError(msg)

    resolved_encoding = options.encoding or detect_encoding(file_path)
    resolved_separator = options.separator or detect_separator(file_path, resolved_encoding)
    options = LoadOptions(
        skip_header=options.skip_header,
        separator=resolved_separator,
        strip=options.strip,
        encoding=resolved_encoding,
    )

    try:
        text = file_path.read_text(encoding=resolved_encoding)
    except UnicodeDecodeError as exc:
        msg = f"Il file {file_path.name} non è testo {resolved_encoding} valido: {exc}"
        log.error(msg)
        raise ParseError(msg) from exc
    except OSError as exc:
        log.error("Errore in lettura file %s: %s", file_path.name, exc, exc_info=True)
        raise

    grid = parse_text(text, options)
    log.info(
        "File caricato: %s (righe=%d, colonne=%d, separatore=%r)",
        file_path.name,
        len(grid),
        len(grid[0]) if grid else 0,
        resolved_separator,
    )
    return grid


async def load_async(
    path: str | os.PathLike,
    skip_header: bool = False,
    separator: Optional[str] = DEFAULT_SEPARATOR,
    encoding: Optional[str] = None,
    strip: bool = True,
) -> Grid:
    """Come load(), ma la lettura avviene in un worker thread."""
    return await asyncio.to_thread(
        load,
        path,
        skip_header=skip_header,
        separator=separator,
        encoding=encoding,
        strip=strip,
    )


def parse_text(text: str, options: Optional[LoadOptions] = None) -> Grid:
    """
    Delega a pandas la sintassi del testo delimitato (quoting, escape, fine riga)
    e restituisce le celle come lista di liste di stringhe.
    """
    options = (options or LoadOptions()).validate()

    try:
        df = pd.read_csv(io.StringIO(text), **options.read_csv_kwargs())
    except pd.errors.EmptyDataError:
        log.warning("Testo vuoto: nessuna riga da caricare")
        return []
    except pd.errors.ParserError as exc:
        log.error("Testo delimitato malformato: %s", exc)
        raise ParseError(str(exc)) from exc

    # Celle mancanti (non stringa) indicano righe più corte dell'header
    if df.isna().to_numpy().any():
        bad_rows = df.index[df.isna().any(axis=1)].tolist()
        msg = f"Righe con celle mancanti: {[i + 1 for i in bad_rows[:10]]}"
        log.error(msg)
        raise ShapeError(msg)

    rows = df.to_numpy(dtype=object).tolist()
    if options.strip:
        return [[str(cell).strip() for cell in row] for row in rows]
    return [[str(cell) for cell in row] for row in rows]
