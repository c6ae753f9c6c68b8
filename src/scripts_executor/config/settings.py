"""
============================================================
 File: settings.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Impostazioni statiche del launcher: nomi di default degli
     interpreti, percorsi convenzionali dentro un virtualenv e
     nomi dei file di configurazione e di log.
============================================================
"""

from pathlib import PurePath

# Interpreti usati quando il manifest non li specifica
DEFAULT_PYTHON_PATH = "python3"
DEFAULT_POWERSHELL_PATH = "pwsh"

# Tipi di script riconosciuti (confronto case-insensitive)
PYTHON_TYPE = "python"
POWERSHELL_TYPE = "powershell"

# Posizioni dell'interprete dentro un virtualenv, in ordine di ricerca
VENV_PYTHON_CANDIDATES = (
    PurePath("Scripts", "python.exe"),  # Windows
    PurePath("bin", "python"),          # Linux/Mac
)

SETTINGS_FILE_NAME = "executor.ini"
LOG_FILE_NAME = "executor.log"
