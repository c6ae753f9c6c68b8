"""
============================================================
 File: errors.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Gerarchia degli errori del launcher. Ogni errore conserva
     il contesto (percorso, nome dello script, causa) e produce
     un messaggio leggibile da stampare su stderr.
============================================================
"""

from __future__ import annotations

from typing import Iterable, Optional


class ExecutorError(RuntimeError):
    """Base class for every error raised by the launcher."""


class ReadError(ExecutorError):
    """The manifest file could not be read."""

    def __init__(self, path, cause: Optional[BaseException] = None) -> None:
        self.path = str(path)
        self.cause = cause
        message = f"cannot read '{self.path}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ParseError(ExecutorError):
    """The manifest content is not a well-formed manifest."""

    def __init__(self, path, detail: str) -> None:
        self.path = str(path) if path is not None else None
        self.detail = detail
        if self.path:
            message = f"invalid manifest '{self.path}': {detail}"
        else:
            message = f"invalid manifest: {detail}"
        super().__init__(message)


class DuplicateNameError(ExecutorError):
    """Two or more scripts share the same name (strict mode only)."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = list(names)
        joined = ", ".join(f"'{n}'" for n in self.names)
        super().__init__(f"duplicate script names: {joined}")


class NotFoundError(ExecutorError):
    """No script with the requested name exists in the manifest."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"script '{name}' not found")


class UnknownTypeError(ExecutorError):
    """A script declares a type that is neither python nor powershell."""

    def __init__(self, script_type: str, script_name: Optional[str] = None) -> None:
        self.script_type = script_type
        self.script_name = script_name
        message = f"unknown script type: {script_type}"
        if script_name:
            message = f"{message} (script '{script_name}')"
        super().__init__(message)


class ExecutionError(ExecutorError):
    """The child process could not be started or exited with a non-zero status."""

    def __init__(
        self,
        script_name: str,
        *,
        cause: Optional[BaseException] = None,
        returncode: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        self.script_name = script_name
        self.cause = cause
        self.returncode = returncode
        if detail is not None:
            message = f"script '{script_name}' {detail}"
        elif cause is not None:
            message = f"script '{script_name}' failed to start: {cause}"
        elif returncode is not None and returncode < 0:
            message = f"script '{script_name}' terminated by signal {-returncode}"
        else:
            message = f"script '{script_name}' failed with exit code: {returncode}"
        super().__init__(message)


class ScriptFileNotFoundError(ExecutionError):
    """The script file is missing; raised only when path validation is enabled."""

    def __init__(self, script_name: str, script_path) -> None:
        self.script_path = str(script_path)
        super().__init__(script_name, detail=f"file not found: {self.script_path}")


__all__ = [
    "ExecutorError",
    "ReadError",
    "ParseError",
    "DuplicateNameError",
    "NotFoundError",
    "UnknownTypeError",
    "ExecutionError",
    "ScriptFileNotFoundError",
]
