"""
PassForge Output Module
========================

Console display for PassForge results.
"""

from passforge.output.console import PassForgeConsoleOutput

__all__ = ["PassForgeConsoleOutput"]
