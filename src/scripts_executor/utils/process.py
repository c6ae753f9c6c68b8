"""
============================================================
 File: process.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Handle del processo figlio: avvio con stdin/stdout/stderr
     collegati direttamente a quelli del launcher, attesa della
     terminazione e lettura dell'exit code. Nessun timeout e
     nessuna terminazione forzata.
============================================================
"""

import subprocess
import sys

from .logger import logger


class ChildProcess:
    """Processo figlio con stream ereditati dal processo padre"""

    def __init__(self, argv, cwd=None):
        self.argv = list(argv)
        self.cwd = cwd
        self.process = None
        self.returncode = None

    def launch(self):
        """Avvia il processo; solleva OSError se non può essere avviato"""
        if self.process is not None:
            raise RuntimeError("process already launched")

        # L'output già stampato dal launcher deve precedere quello del figlio
        sys.stdout.flush()
        sys.stderr.flush()

        # stdin/stdout/stderr = None: il figlio eredita quelli del padre
        self.process = subprocess.Popen(self.argv, cwd=self.cwd)
        logger.debug(f"Processo avviato (pid {self.process.pid}): {self.argv}")
        return self

    def wait(self):
        """Attende la fine del processo e restituisce l'exit code"""
        if self.process is None:
            raise RuntimeError("process not launched")
        self.returncode = self.process.wait()
        logger.debug(f"Processo {self.process.pid} terminato con exit code {self.returncode}")
        return self.returncode

    @property
    def pid(self):
        return self.process.pid if self.process is not None else None

    @property
    def succeeded(self):
        return self.returncode == 0
