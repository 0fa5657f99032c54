"""
Command-Line Interface
=======================

This module contains the command-line interface for the knowledge manager.
It reads and edits a knowledge file without opening a window. The entry
point is knowledge_base.cli.main:main.
"""
