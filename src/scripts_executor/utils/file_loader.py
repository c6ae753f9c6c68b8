"""
============================================================
 File: file_loader.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Funzioni di utilità dedicate alla gestione di file.
     Legge un file di testo per intero e trasforma gli errori
     del filesystem in ReadError.
============================================================
"""

from pathlib import Path

from ..models.errors import ReadError


def load_file(path, encoding="utf-8"):
    p = Path(path)
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(p, e) from e
