"""BOSH vars store readers."""

from boshkit.bosh.vars_store import CredhubGetter, SSHKeyGetter

__all__ = ["CredhubGetter", "SSHKeyGetter"]
