from __future__ import annotations

import logging
import os
from datetime import datetime
from logging import Logger
from pathlib import Path
from typing import Optional

BASE_LOGGER_NAME = "gridview"

COMMON_FMT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_FMT = "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(lineno)d | %(message)s"

# Come da convenzione per le librerie: nessun output finché l'applicazione
# non configura il logging (propagazione al root o LogManager.configure).
logging.getLogger(BASE_LOGGER_NAME).addHandler(logging.NullHandler())


class LogManager:
    """
    Logger gerarchico 'gridview.<componente>'.

    Di default i record propagano al root logger dell'applicazione ospite.
    File giornaliero e console sono opzionali, tramite configure().
    """

    _logfile_path: Optional[Path] = None

    def __init__(self, component: str = "app", level: Optional[int] = None) -> None:
        self.component = component.strip() or "app"
        self.level = level

    def get_logger(self, level: Optional[int] = None) -> Logger:
        logger = logging.getLogger(BASE_LOGGER_NAME).getChild(self.component)
        chosen = level if level is not None else self.level
        if chosen is not None:
            logger.setLevel(chosen)
        return logger

    @classmethod
    def configure(
        cls,
        log_dir: Optional[str | os.PathLike] = None,
        level: int = logging.INFO,
        console: bool = False,
    ) -> Logger:
        """
        Attiva l'output del logger 'gridview'.

        - log_dir: cartella del file UTF-8 giornaliero 'gridview_YYYYMMDD.log'
          (creata se manca); None = nessun file.
        - console: aggiunge uno StreamHandler su stderr.

        Chiamate ripetute non duplicano gli handler.
        """
        base = logging.getLogger(BASE_LOGGER_NAME)
        base.setLevel(level)

        if log_dir is not None:
            logs_dir = Path(log_dir)
            logs_dir.mkdir(parents=True, exist_ok=True)
            logfile = logs_dir / f"gridview_{datetime.now():%Y%m%d}.log"

            existing_file = any(
                isinstance(h, logging.FileHandler)
                and getattr(h, "baseFilename", None) == os.path.abspath(logfile)
                for h in base.handlers
            )
            if not existing_file:
                fh = logging.FileHandler(logfile, encoding="utf-8")
                fh.setFormatter(logging.Formatter(FILE_FMT))
                base.addHandler(fh)
            cls._logfile_path = logfile

        if console and not any(type(h) is logging.StreamHandler for h in base.handlers):
            sh = logging.StreamHandler()
            sh.setFormatter(logging.Formatter(COMMON_FMT))
            base.addHandler(sh)

        base.info("Logging gridview attivo (file=%s, console=%s)", cls._logfile_path, console)
        return base

    @classmethod
    def reset(cls) -> None:
        """Rimuove gli handler aggiunti da configure(), lasciando il NullHandler."""
        base = logging.getLogger(BASE_LOGGER_NAME)
        for handler in list(base.handlers):
            if isinstance(handler, logging.NullHandler):
                continue
            base.removeHandler(handler)
            handler.close()
        base.setLevel(logging.NOTSET)
        cls._logfile_path = None

    @classmethod
    def logfile_path(cls) -> Optional[Path]:
        return cls._logfile_path
