"""
============================================================
 File: script_repository.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Questo modulo gestisce il caricamento del manifest JSON
     degli script. Legge il file, lo converte in un
     ExecutorConfig tipizzato applicando i default degli
     interpreti e fornisce la ricerca degli script per nome.
============================================================
"""

import json
from pathlib import Path

from ..models.errors import DuplicateNameError, NotFoundError, ParseError
from ..models.script_model import ExecutorConfig
from ..utils.file_loader import load_file
from ..utils.logger import logger


def parse_config(text, source=None):
    """Converte il contenuto di un manifest in ExecutorConfig."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(source, str(e)) from e
    return ExecutorConfig.from_dict(data, source=source)


def load_config(path, strict_names=False):
    """Legge e valida il manifest indicato da ``path``.

    Solleva ReadError se il file non è leggibile, ParseError se il
    contenuto non è un manifest valido e, con ``strict_names``,
    DuplicateNameError se due script hanno lo stesso nome.
    """
    source = str(path)
    config = parse_config(load_file(path), source=source)

    duplicates = config.duplicate_names()
    if duplicates:
        if strict_names:
            raise DuplicateNameError(duplicates)
        logger.warning(f"Nomi di script duplicati in {source}: {', '.join(duplicates)} (vale il primo)")

    logger.info(f"Manifest caricato: {source} ({len(config.scripts)} script)")
    return config


class ScriptRepository:
    def __init__(self, path, strict_names=False):
        self.path = Path(path)
        self.config = load_config(self.path, strict_names=strict_names)

    def get_script(self, name):
        script = self.config.find_script(name)
        if script is None:
            raise NotFoundError(name)
        return script

    def list_scripts(self):
        return list(self.config.scripts)
