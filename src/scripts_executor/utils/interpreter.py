"""
============================================================
 File: interpreter.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Scelta dell'eseguibile che interpreta uno script. Per gli
     script Python cerca prima l'interprete del virtualenv
     configurato (Scripts/python.exe, poi bin/python); se non
     c'è usa python_path. Per PowerShell usa sempre
     powershell_path. I nomi senza percorso vengono risolti dal
     sistema operativo tramite PATH al momento del lancio.
============================================================
"""

from pathlib import Path

from ..config import settings
from ..models.errors import UnknownTypeError
from .logger import logger


def find_venv_python(python_env):
    """Restituisce il percorso assoluto dell'interprete del virtualenv, o None."""
    if not python_env:
        return None

    venv_path = Path(python_env)
    if not venv_path.exists():
        logger.debug(f"Virtualenv non trovato: {venv_path}")
        return None

    for candidate in settings.VENV_PYTHON_CANDIDATES:
        python_exe = venv_path / candidate
        if python_exe.exists():
            # Assoluto: lo script gira con un'altra working directory
            return python_exe.absolute()

    logger.debug(f"Nessun interprete trovato nel virtualenv {venv_path}")
    return None


def resolve_interpreter(config, script_type):
    kind = script_type.lower()

    if kind == settings.PYTHON_TYPE:
        venv_python = find_venv_python(config.python_env)
        if venv_python is not None:
            logger.debug(f"Interprete dal virtualenv: {venv_python}")
            return str(venv_python)
        logger.debug(f"Interprete Python: {config.python_path}")
        return config.python_path

    if kind == settings.POWERSHELL_TYPE:
        logger.debug(f"Interprete PowerShell: {config.powershell_path}")
        return config.powershell_path

    raise UnknownTypeError(script_type)
