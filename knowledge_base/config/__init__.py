"""
Configuration Management
==========================

This module contains configuration management for the knowledge manager. It
provides a single, consistent configuration system for both CLI and GUI
interfaces.
"""

from knowledge_base.config.manager import ConfigManager
