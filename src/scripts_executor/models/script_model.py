"""
============================================================
 File: script_model.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Modello dati del manifest. ScriptEntry rappresenta uno
     script eseguibile (nome, tipo, percorso, argomenti e
     dipendenze dichiarate); ExecutorConfig raccoglie le
     impostazioni globali degli interpreti e la lista ordinata
     degli script.
============================================================
"""

from ..config import settings
from .errors import ParseError


def _require_str(data, key, where, source):
    value = data.get(key)
    if value is None:
        raise ParseError(source, f"{where}: missing required field '{key}'")
    if not isinstance(value, str):
        raise ParseError(source, f"{where}: field '{key}' must be a string")
    return value


def _optional_str(data, key, where, source):
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ParseError(source, f"{where}: field '{key}' must be a string")
    return value


def _optional_str_list(data, key, where, source):
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ParseError(source, f"{where}: field '{key}' must be a list of strings")
    return list(value)


class ScriptEntry:
    """Uno script dichiarato nel manifest.

    Il campo ``type`` viene conservato così com'è: la verifica
    avviene solo al momento dell'esecuzione. ``python_deps`` e
    ``ps_modules`` sono solo informativi.
    """

    def __init__(self, name, type, script_path, python_deps=None, ps_modules=None,
                 working_dir=None, args=None):
        self.name = name
        self.type = type
        self.script_path = script_path
        self.python_deps = python_deps or []
        self.ps_modules = ps_modules or []
        self.working_dir = working_dir or None
        self.args = args or []

    @classmethod
    def from_dict(cls, data, index=0, source=None):
        where = f"scripts[{index}]"
        if not isinstance(data, dict):
            raise ParseError(source, f"{where}: expected an object")
        return cls(
            name=_require_str(data, "name", where, source),
            type=_require_str(data, "type", where, source),
            script_path=_require_str(data, "script_path", where, source),
            python_deps=_optional_str_list(data, "python_deps", where, source),
            ps_modules=_optional_str_list(data, "ps_modules", where, source),
            working_dir=_optional_str(data, "working_dir", where, source),
            args=_optional_str_list(data, "args", where, source),
        )

    @property
    def normalized_type(self):
        return self.type.lower()

    def __repr__(self):
        return f"ScriptEntry(name={self.name!r}, type={self.type!r}, script_path={self.script_path!r})"


class ExecutorConfig:
    """Impostazioni globali degli interpreti e lista ordinata degli script."""

    def __init__(self, python_path=None, python_env=None, powershell_path=None,
                 scripts=None, source=None):
        # Stringa vuota equivale a "non impostato"
        self.python_path = python_path or settings.DEFAULT_PYTHON_PATH
        self.python_env = python_env or None
        self.powershell_path = powershell_path or settings.DEFAULT_POWERSHELL_PATH
        self.scripts = list(scripts or [])
        self.source = source

    @classmethod
    def from_dict(cls, data, source=None):
        if not isinstance(data, dict):
            raise ParseError(source, "top-level value must be an object")
        if "scripts" not in data or data["scripts"] is None:
            raise ParseError(source, "missing required field 'scripts'")
        raw_scripts = data["scripts"]
        if not isinstance(raw_scripts, list):
            raise ParseError(source, "field 'scripts' must be a list")

        scripts = [ScriptEntry.from_dict(item, idx, source) for idx, item in enumerate(raw_scripts)]
        return cls(
            python_path=_optional_str(data, "python_path", "manifest", source),
            python_env=_optional_str(data, "python_env", "manifest", source),
            powershell_path=_optional_str(data, "powershell_path", "manifest", source),
            scripts=scripts,
            source=source,
        )

    def find_script(self, name):
        """Restituisce il primo script con il nome indicato, oppure None."""
        for script in self.scripts:
            if script.name == name:
                return script
        return None

    def script_names(self):
        return [s.name for s in self.scripts]

    def duplicate_names(self):
        seen = set()
        duplicates = []
        for name in self.script_names():
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        return duplicates
