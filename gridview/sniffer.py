from __future__ import annotations

import csv
import os
from typing import Sequence

from .errors import ParseError
from .logger import LogManager
from .options import DEFAULT_ENCODING, SUPPORTED_SEPARATORS

log = LogManager("sniffer").get_logger()

SAMPLE_LINES = 10


# ---------- BOM / encoding ----------
def detect_encoding(path: str | os.PathLike) -> str:
    """Rileva l'encoding in base al BOM (Byte Order Mark); default UTF-8."""
    if not os.path.isfile(path):
        msg = f"File non trovato: {path}"
        log.error(msg)
        raise FileNotFoundError(msg)

    with open(path, "rb") as f:
        start = f.read(4)

    if start.startswith(b"\xff\xfe"):
        return "utf-16"  # LE; open(..., 'utf-16') consuma il BOM
    if start.startswith(b"\xfe\xff"):
        return "utf-16-be"
    if start.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"
    return DEFAULT_ENCODING


# ---------- Separatore ----------
def detect_separator(
    path: str | os.PathLike,
    encoding: str = DEFAULT_ENCODING,
    candidates: Sequence[str] = SUPPORTED_SEPARATORS,
) -> str:
    """Rileva il separatore sulle prime righe non vuote del file."""
    with open(path, "r", encoding=encoding, errors="ignore") as f:
        lines = [line.strip() for _, line in zip(range(SAMPLE_LINES), f) if line.strip()]

    if not lines:
        msg = f"Impossibile rilevare il separatore, file vuoto: {path}"
        log.error(msg)
        raise ParseError(msg)

    sample = "\n".join(lines)
    try:
        dialect = csv.Sniffer().sniff(sample, delimiters="".join(candidates))
        separator = dialect.delimiter
    except csv.Error:
        # Fallback: il candidato che compare più spesso nel campione
        separator = max(candidates, key=sample.count)

    log.info("Separatore rilevato per %s: %r", os.path.basename(path), separator)
    return separator
