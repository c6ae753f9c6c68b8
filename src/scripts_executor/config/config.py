"""
============================================================
File: config.py
Author: Internal Systems Automation Team
Created: 2026-01-12
Last Updated: 2026-10-18

Description:
Gestione della configurazione centralizzata del launcher.
Legge executor.ini e fornisce accesso ai settings in tutta
l'app (cartella dei log, debug, controlli opzionali sul
manifest). Il manifest degli script resta un file separato.
============================================================
"""

import configparser
from pathlib import Path
import sys

from . import settings


class ConfigManager:
    """Gestore centralizzato della configurazione del launcher"""

    _instance = None
    _config = None

    def __new__(cls, config_path=None):
        if cls._instance is None or config_path is not None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize(config_path)
        return cls._instance

    @classmethod
    def reset(cls):
        """Dimentica l'istanza corrente (usato dai test e dal riavvio del main)"""
        cls._instance = None

    def _initialize(self, config_path=None):
        """Inizializza il configuration manager"""
        self._config = configparser.ConfigParser()
        self._load_defaults()

        if config_path is not None:
            self._config_path = Path(config_path)
        else:
            self._config_path = self._find_config_file()

        # Il file scelto viene registrato dal main, dopo setup_logging
        if self._config_path and self._config_path.exists():
            self._config.read(self._config_path, encoding='utf-8')
        else:
            self._config_path = None

    def _find_config_file(self):
        """Cerca il file executor.ini in varie locazioni"""

        # 1. Prova nella cartella dell'eseguibile (per exe)
        if getattr(sys, 'frozen', False):
            exe_dir = Path(sys.executable).parent
            config_file = exe_dir / settings.SETTINGS_FILE_NAME
            if config_file.exists():
                return config_file

        # 2. Prova nella cartella config/
        config_file = Path('config') / settings.SETTINGS_FILE_NAME
        if config_file.exists():
            return config_file

        # 3. Prova nella directory corrente
        config_file = Path(settings.SETTINGS_FILE_NAME)
        if config_file.exists():
            return config_file

        return None

    def _load_defaults(self):
        """Carica configurazione di default"""
        self._config['PATHS'] = {
            'logs_directory': 'logs',
        }
        self._config['APP'] = {
            'debug': 'false',
        }
        self._config['EXECUTOR'] = {
            'strict_names': 'false',
            'validate_script_paths': 'false',
        }

    def get(self, section, key, fallback=None):
        """Ottiene un valore dalla configurazione"""
        try:
            return self._config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def get_bool(self, section, key, fallback=False):
        """Ottiene un valore booleano dalla configurazione"""
        try:
            return self._config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_path(self, section, key):
        """Ottiene un percorso; i relativi sono risolti rispetto all'exe se frozen"""
        path_str = self.get(section, key)
        if not path_str:
            return None

        path = Path(path_str)
        if path.is_absolute():
            return path

        if getattr(sys, 'frozen', False):
            return (Path(sys.executable).parent / path).resolve()
        return path.resolve()

    @property
    def logs_dir(self):
        """Directory dei log"""
        return self.get_path('PATHS', 'logs_directory')

    @property
    def debug(self):
        """Modalità debug attiva"""
        return self.get_bool('APP', 'debug', False)

    @property
    def strict_names(self):
        """Rifiuta manifest con nomi di script duplicati"""
        return self.get_bool('EXECUTOR', 'strict_names', False)

    @property
    def validate_script_paths(self):
        """Verifica l'esistenza del file dello script prima del lancio"""
        return self.get_bool('EXECUTOR', 'validate_script_paths', False)

    @property
    def config_file(self):
        """Percorso del file di configurazione"""
        return self._config_path
