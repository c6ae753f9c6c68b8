"""
============================================================
File: __init__.py
Author: Internal Systems Automation Team
Created: 2026-10-18

Description:
Configurazione del launcher: default statici e impostazioni
lette da executor.ini.
============================================================
"""
