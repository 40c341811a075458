"""
PassForge Shared Module
=======================

Configuration, logging and console utilities used by the PassForge tool
and its command-line front end.
"""

from shared.config import ConfigError, ForgeConfig

__all__ = ["ConfigError", "ForgeConfig"]
