"""Persisted deployment state."""

from boshkit.storage.state import BOSH, Jumpbox, State, StateStore, StateValidator

__all__ = ["BOSH", "Jumpbox", "State", "StateStore", "StateValidator"]
