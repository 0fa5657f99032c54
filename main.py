#!/usr/bin/env python3
"""
Knowledge Manager - GUI Entry Point
===================================
Simple Tkinter front end using modular architecture.

Usage:
    python main.py
"""

import tkinter as tk
from controller import KnowledgeController
from view import KnowledgeView
from knowledge_base._logging import configure_logging


def main() -> None:
    """Application entry point - wires layers together."""
    configure_logging()

    # Create the root window
    root = tk.Tk()

    # Create controller (logic layer)
    controller = KnowledgeController()

    # Create view (presentation layer), inject controller
    app = KnowledgeView(root, controller)
    app.load_initial()

    # Run the application
    app.run()


if __name__ == "__main__":
    main()
