"""
Output Reporters
================

- :class:`CLIReporter` - Rich terminal output for the leftovers command
"""

from boshkit.reporters.cli_reporter import CLIReporter

__all__ = ["CLIReporter"]
