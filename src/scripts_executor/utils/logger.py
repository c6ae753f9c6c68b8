"""
============================================================
 File: logger.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Logger condiviso del launcher. A console usa RichHandler
     su stderr (stdout resta libero per l'output degli script),
     su file scrive righe con timestamp in logs/executor.log.
============================================================
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from ..config import settings

logger = logging.getLogger("scripts_executor")
logger.addHandler(logging.NullHandler())


def setup_logging(logs_dir=None, debug=False):
    """Configura gli handler del logger e restituisce il logger."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
    )
    if debug:
        console_handler.setLevel(logging.DEBUG)
    else:
        console_handler.setLevel(logging.WARNING)
        # Gli errori vengono già stampati su stderr dall'entry point
        console_handler.addFilter(lambda record: record.levelno < logging.ERROR)
    logger.addHandler(console_handler)

    if logs_dir is not None:
        log_file_path = Path(logs_dir) / settings.LOG_FILE_NAME
        try:
            # Assicura che la cartella logs esista
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        except OSError as e:
            # Il log su file è accessorio: si continua solo con la console
            logger.warning(f"Log su file disattivato, impossibile aprire {log_file_path}: {e}")
            return logger
        file_handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(message)s"))
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    return logger
