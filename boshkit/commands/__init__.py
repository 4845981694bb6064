"""Command implementations."""

from boshkit.commands.print_env import PrintEnv, Severity, StepResult

__all__ = ["PrintEnv", "Severity", "StepResult"]
