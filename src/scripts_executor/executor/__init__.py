"""
============================================================
File: __init__.py
Author: Internal Systems Automation Team
Created: 2026-10-18

Description:
Costruzione ed esecuzione del comando di uno script.
============================================================
"""
