"""
============================================================
File: main.py
Author: Internal Systems Automation Team
Created: 2025-01-10
Last Updated: 2026-10-18

Description:
Entry point del launcher. Legge il manifest indicato sulla
riga di comando, poi esegue lo script richiesto (con gli
argomenti aggiuntivi) oppure tutti gli script in ordine.
Exit code 0 in caso di successo, 1 per qualsiasi errore.

Uso:
    scripts-executor [opzioni] <config.json> [script_name] [args...]
============================================================
"""

import argparse
import traceback
import sys

from rich.console import Console
from rich.markup import escape

from .config.config import ConfigManager
from .db.script_repository import ScriptRepository
from .dispatch.dispatcher import ScriptDispatcher
from .models.errors import ExecutorError
from .utils.logger import logger, setup_logging


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser():
    p = _ArgumentParser(
        prog="scripts-executor",
        description="Run the Python and PowerShell scripts declared in a JSON manifest.",
        epilog="Launcher options must precede the manifest path; everything after "
               "script_name is passed to the script unchanged.",
    )
    p.add_argument("--list", action="store_true", help="Show the scripts in the manifest and exit")
    p.add_argument("--dry-run", action="store_true", help="Print the commands without running them")
    p.add_argument("--strict", action="store_true", help="Reject manifests with duplicate script names")
    p.add_argument("--validate-paths", action="store_true",
                   help="Fail before launch when a script file does not exist")
    p.add_argument("--settings", help="Path to executor.ini (default: config/executor.ini or ./executor.ini)")
    p.add_argument("--debug", action="store_true", help="Verbose logging on stderr")
    p.add_argument("config_path", help="Path to the JSON manifest")
    p.add_argument("script_name", nargs="?", help="Run only this script")
    p.add_argument("script_args", nargs=argparse.REMAINDER, help="Extra arguments for the script")
    return p


def main(argv=None):
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    err_console = Console(stderr=True)

    if not argv:
        parser.print_usage(sys.stderr)
        return 1

    args = parser.parse_args(argv)
    if args.script_name is None and args.script_args:
        parser.error("launcher options must precede the manifest path")

    ConfigManager.reset()
    app_config = ConfigManager(args.settings)
    setup_logging(app_config.logs_dir, debug=args.debug or app_config.debug)

    logger.info("=" * 60)
    logger.info(f"Avvio launcher: {' '.join(argv)}")
    if app_config.config_file:
        logger.info(f"Config trovato: {app_config.config_file}")
    elif args.settings:
        logger.warning(f"{args.settings} non trovato, usando defaults")
    else:
        logger.debug("executor.ini non trovato, usando defaults")

    try:
        repository = ScriptRepository(args.config_path, strict_names=args.strict or app_config.strict_names)
    except ExecutorError as e:
        logger.error(f"Errore nel caricamento del manifest: {e}")
        err_console.print(f"Error loading config: {escape(str(e))}", soft_wrap=True, highlight=False, emoji=False)
        return 1

    config = repository.config
    dispatcher = ScriptDispatcher(
        config,
        console=Console(),
        dry_run=args.dry_run,
        validate_paths=args.validate_paths or app_config.validate_script_paths,
    )

    if args.list:
        dispatcher.show_scripts()
        return 0

    try:
        if args.script_name is not None:
            try:
                dispatcher.run_named(args.script_name, args.script_args)
            except ExecutorError as e:
                logger.error(f"Errore nello script {args.script_name}: {e}")
                err_console.print(f"Error running script: {escape(str(e))}", soft_wrap=True, highlight=False, emoji=False)
                return 1
        else:
            try:
                dispatcher.run_all()
            except ExecutorError as e:
                # Nel batch ogni errore riguarda uno script preciso
                failed = getattr(e, "script_name", None) or "script"
                logger.error(f"Batch interrotto su {failed}: {e}")
                err_console.print(f"Error running {escape(failed)}: {escape(str(e))}",
                                  soft_wrap=True, highlight=False, emoji=False)
                return 1
    except KeyboardInterrupt:
        logger.warning("Esecuzione interrotta dall'utente")
        err_console.print("Interrupted", highlight=False)
        return 130

    return 0


def run():
    try:
        sys.exit(main())
    except Exception as e:
        logger.exception(f"ERRORE CRITICO: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    run()
