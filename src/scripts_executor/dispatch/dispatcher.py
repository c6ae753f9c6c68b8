"""
============================================================
File: dispatcher.py
Author: Internal Systems Automation Team
Created: 2025-01-10
Last Updated: 2026-10-18

Description:
Modulo responsabile della scelta degli script da eseguire:
un singolo script cercato per nome oppure tutti gli script
del manifest nell'ordine dichiarato, fermandosi al primo
errore. Usa la libreria Rich per i messaggi a console e per
la tabella degli script disponibili.
============================================================
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..executor import script_executor
from ..models.errors import NotFoundError


def _announce(console, text):
    console.print(text, soft_wrap=True, highlight=False, emoji=False)


def _run_one(config, script, args, console, dry_run, validate_paths):
    if dry_run:
        command = script_executor.build_command(config, script, args)
        _announce(console, f"Command: {escape(command.display())}  (cwd: {escape(command.working_dir)})")
        return
    script_executor.execute(config, script, args, validate_paths=validate_paths)


def run_named(config, name, args=None, *, console=None, dry_run=False, validate_paths=False):
    """Esegue il primo script chiamato ``name`` passando ``args`` come argomenti extra."""
    console = console or Console()
    script = config.find_script(name)
    if script is None:
        raise NotFoundError(name)
    _run_one(config, script, list(args or []), console, dry_run, validate_paths)


def run_all(config, *, console=None, dry_run=False, validate_paths=False):
    """Esegue tutti gli script in ordine; il primo errore interrompe il batch."""
    console = console or Console()
    for script in config.scripts:
        _announce(console, f"Running script: {escape(script.name)}")
        _run_one(config, script, [], console, dry_run, validate_paths)


def render_script_table(config, console=None):
    console = console or Console()
    if not config.scripts:
        console.print("[yellow]No scripts found in manifest[/yellow]")
        return

    table = Table(show_header=True, header_style="bold blue")
    table.add_column("No.", justify="right")
    table.add_column("Script Name")
    table.add_column("Type")
    table.add_column("Path")
    table.add_column("Working Dir")
    table.add_column("Args")
    table.add_column("Dependencies")

    for idx, s in enumerate(config.scripts, start=1):
        deps = s.python_deps + s.ps_modules
        table.add_row(
            str(idx),
            escape(s.name),
            escape(s.type),
            escape(s.script_path),
            escape(script_executor.working_dir_for(s)),
            escape(" ".join(s.args)),
            escape(", ".join(deps)),
        )

    console.print(table)


class ScriptDispatcher:
    def __init__(self, config, console=None, dry_run=False, validate_paths=False):
        self.config = config
        self.console = console or Console()
        self.dry_run = dry_run
        self.validate_paths = validate_paths

    def run_named(self, name, args=None):
        run_named(self.config, name, args, console=self.console,
                  dry_run=self.dry_run, validate_paths=self.validate_paths)

    def run_all(self):
        run_all(self.config, console=self.console,
                dry_run=self.dry_run, validate_paths=self.validate_paths)

    def show_scripts(self):
        render_script_table(self.config, self.console)
