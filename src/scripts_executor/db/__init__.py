"""
============================================================
File: __init__.py
Author: Internal Systems Automation Team
Created: 2026-10-18

Description:
Caricamento del manifest degli script.
============================================================
"""
