"""
============================================================
File: __init__.py
Author: Internal Systems Automation Team
Created: 2026-10-18

Description:
Launcher di script Python e PowerShell guidato da un
manifest JSON.
============================================================
"""

__version__ = "1.0.0"
