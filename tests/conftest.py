# tests/conftest.py
from __future__ import annotations

import io
import json
import logging
import textwrap
from pathlib import Path

import pytest
from rich.console import Console

from scripts_executor.config.config import ConfigManager
from scripts_executor.executor import script_executor
from scripts_executor.utils.logger import logger


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Every test runs in its own directory with a fresh ConfigManager and logger."""
    monkeypatch.chdir(tmp_path)
    ConfigManager.reset()
    yield tmp_path
    ConfigManager.reset()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(logging.NullHandler())
    logger.propagate = True


@pytest.fixture
def write_manifest(tmp_path):
    def _write(data, name: str = "manifest.json") -> Path:
        path = tmp_path / name
        text = data if isinstance(data, str) else json.dumps(data, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def py_script(tmp_path):
    """Create a Python script under ``tmp_path/scripts`` and return its absolute path."""

    def _create(name: str, source: str) -> Path:
        folder = tmp_path / "scripts"
        folder.mkdir(exist_ok=True)
        path = folder / name
        path.write_text(textwrap.dedent(source).lstrip(), encoding="utf-8")
        return path

    return _create


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


class LaunchRecorder:
    """Stand-in for ChildProcess that records argv/cwd instead of spawning."""

    def __init__(self):
        self.launches = []
        self.fail_on = {}
        self.missing = set()

    def returncode_for(self, argv):
        for token, code in self.fail_on.items():
            if token in argv:
                return code
        return 0

    def factory(self, argv, cwd=None):
        return _FakeChild(self, argv, cwd)


class _FakeChild:
    def __init__(self, recorder, argv, cwd):
        self.recorder = recorder
        self.argv = list(argv)
        self.cwd = cwd
        self.returncode = None

    def launch(self):
        if self.argv[0] in self.recorder.missing:
            raise FileNotFoundError(2, "No such file or directory", self.argv[0])
        self.recorder.launches.append((self.argv, self.cwd))
        return self

    def wait(self):
        self.returncode = self.recorder.returncode_for(self.argv)
        return self.returncode


@pytest.fixture
def recorder(monkeypatch):
    rec = LaunchRecorder()
    monkeypatch.setattr(script_executor, "ChildProcess", rec.factory)
    return rec
