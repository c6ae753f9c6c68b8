"""
============================================================
 File: script_executor.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Esecuzione di un singolo script del manifest. Costruisce
     il comando completo (interprete + flag + percorso dello
     script + argomenti), determina la working directory,
     lancia il processo figlio e ne attende la fine.
============================================================
"""

from pathlib import Path
import shlex

from ..config import settings
from ..models.errors import ExecutionError, ScriptFileNotFoundError, UnknownTypeError
from ..utils.interpreter import resolve_interpreter
from ..utils.logger import logger
from ..utils.process import ChildProcess


class Command:
    """Invocazione pronta per il lancio"""

    def __init__(self, executable, args, working_dir):
        self.executable = executable
        self.args = list(args)
        self.working_dir = working_dir

    @property
    def argv(self):
        return [self.executable] + self.args

    def display(self):
        return " ".join(shlex.quote(str(part)) for part in self.argv)

    def __repr__(self):
        return f"Command(argv={self.argv!r}, working_dir={self.working_dir!r})"


def working_dir_for(script):
    if script.working_dir:
        return script.working_dir
    # Path("deploy.ps1").parent == Path(".")
    return str(Path(script.script_path).parent)


def build_command(config, script, extra_args=None):
    """Costruisce il comando per ``script`` senza lanciarlo."""
    extra_args = list(extra_args or [])
    working_dir = working_dir_for(script)
    kind = script.normalized_type

    if kind == settings.PYTHON_TYPE:
        args = [script.script_path]
    elif kind == settings.POWERSHELL_TYPE:
        args = ["-File", script.script_path]
    else:
        raise UnknownTypeError(script.type, script.name)

    executable = resolve_interpreter(config, kind)
    return Command(executable, args + script.args + extra_args, working_dir)


def check_script_file(script, working_dir):
    # Un percorso relativo viene cercato dall'interprete nella working directory
    script_file = Path(working_dir) / script.script_path
    if not script_file.is_file():
        raise ScriptFileNotFoundError(script.name, script_file)


def execute(config, script, extra_args=None, validate_paths=False):
    """Esegue ``script`` e attende la fine; solleva ExecutionError se fallisce."""
    command = build_command(config, script, extra_args)

    if validate_paths:
        check_script_file(script, command.working_dir)

    logger.info(f"Esecuzione di {script.name}: {command.display()} (cwd: {command.working_dir})")

    child = ChildProcess(command.argv, cwd=command.working_dir)
    try:
        child.launch()
    except OSError as e:
        logger.error(f"Impossibile avviare {script.name}: {e}")
        raise ExecutionError(script.name, cause=e) from e

    returncode = child.wait()
    if returncode != 0:
        logger.error(f"Script {script.name} terminato con exit code {returncode}")
        raise ExecutionError(script.name, returncode=returncode)

    logger.info(f"Script {script.name} completato con successo")
