"""
============================================================
File: __init__.py
Author: Internal Systems Automation Team
Created: 2026-10-18

Description:
Modelli dati del manifest ed errori del launcher.
============================================================
"""
