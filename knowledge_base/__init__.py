"""
Knowledge Manager
=================

A small desktop tool for keeping short knowledge snippets under one or more
tags, persisted to a plain ``tag : text`` file.

This package follows a clean architecture with:
- core/ - Store, undo log, tag resolution and file persistence
- config/ - Configuration management
- cli/ - Command-line interface

The Tkinter window (view.py) and the controller (controller.py) live at the
project root and only talk to this package.
"""

__version__ = "1.0.0"
