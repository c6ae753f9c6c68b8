"""Tests for launcher settings, logging setup and the child process handle."""

from __future__ import annotations

import sys

import pytest

from scripts_executor.config.config import ConfigManager
from scripts_executor.utils.logger import logger, setup_logging
from scripts_executor.utils.process import ChildProcess


def test_defaults_without_settings_file(tmp_path):
    config = ConfigManager()

    assert config.config_file is None
    assert config.debug is False
    assert config.strict_names is False
    assert config.validate_script_paths is False
    assert config.logs_dir == (tmp_path / "logs").resolve()


def test_singleton_until_reset():
    first = ConfigManager()
    assert ConfigManager() is first

    ConfigManager.reset()
    assert ConfigManager() is not first


def test_reads_config_folder(tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "executor.ini").write_text(
        "[APP]\ndebug = yes\n[EXECUTOR]\nvalidate_script_paths = on\n", encoding="utf-8"
    )

    config = ConfigManager()

    assert config.config_file.name == "executor.ini"
    assert config.debug is True
    assert config.validate_script_paths is True
    assert config.strict_names is False


def test_explicit_settings_path_and_absolute_logs(tmp_path):
    logs = tmp_path / "elsewhere"
    ini = tmp_path / "custom.ini"
    ini.write_text(f"[PATHS]\nlogs_directory = {logs}\n[EXECUTOR]\nstrict_names = true\n", encoding="utf-8")

    config = ConfigManager(str(ini))

    assert config.logs_dir == logs
    assert config.strict_names is True


def test_missing_explicit_settings_uses_defaults(tmp_path):
    config = ConfigManager(str(tmp_path / "absent.ini"))

    assert config.config_file is None
    assert config.strict_names is False


def test_invalid_boolean_falls_back(tmp_path):
    (tmp_path / "executor.ini").write_text("[EXECUTOR]\nstrict_names = maybe\n", encoding="utf-8")

    assert ConfigManager().strict_names is False


def test_setup_logging_writes_file(tmp_path):
    setup_logging(tmp_path / "logs")
    logger.info("hello from test")

    for handler in logger.handlers:
        handler.flush()
    assert "hello from test" in (tmp_path / "logs" / "executor.log").read_text(encoding="utf-8")


def test_setup_logging_replaces_handlers(tmp_path):
    setup_logging(tmp_path / "a")
    setup_logging(tmp_path / "b")

    assert len(logger.handlers) == 2


def test_child_process_lifecycle(tmp_path):
    child = ChildProcess([sys.executable, "-c", "import sys; sys.exit(5)"], cwd=str(tmp_path))

    assert child.pid is None
    child.launch()
    assert child.pid is not None
    assert child.wait() == 5
    assert child.returncode == 5
    assert child.succeeded is False


def test_child_process_requires_launch():
    with pytest.raises(RuntimeError):
        ChildProcess(["true"]).wait()


def test_child_process_missing_executable(tmp_path):
    with pytest.raises(OSError):
        ChildProcess([str(tmp_path / "nope")]).launch()


def test_setup_logging_without_writable_logs_dir(tmp_path):
    blocker = tmp_path / "logs"
    blocker.write_text("x", encoding="utf-8")

    setup_logging(blocker)

    assert len(logger.handlers) == 1
