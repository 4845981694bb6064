"""Terraform output access."""

from boshkit.terraform.outputs import OutputManager, Outputs

__all__ = ["OutputManager", "Outputs"]
