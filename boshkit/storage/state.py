"""
Deployment state persisted by the bootloader in ``bbl-state.json``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

from boshkit.core.exceptions import StateError, StateValidationError

logger = logging.getLogger(__name__)

STATE_FILENAME = "bbl-state.json"


@dataclass
class BOSH:
    """Director credentials and address."""

    director_username: str = ""
    director_password: str = ""
    director_address: str = ""
    director_ssl_ca: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BOSH":
        """Create from the camelCase block of the state file."""
        return cls(
            director_username=data.get("directorUsername", ""),
            director_password=data.get("directorPassword", ""),
            director_address=data.get("directorAddress", ""),
            director_ssl_ca=data.get("directorSSLCA", ""),
        )


@dataclass
class Jumpbox:
    """Bastion host descriptor; ``url`` is ``host:port``."""

    url: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Jumpbox":
        """Create from the camelCase block of the state file."""
        return cls(url=data.get("url", ""))


@dataclass
class State:
    """
    Read-only view of an environment's persisted state.

    Attributes:
        iaas: Infrastructure the environment lives on (e.g. "azure")
        env_id: Environment name
        no_director: True when the environment was created without a director
        bosh: Director credentials
        jumpbox: Jumpbox descriptor
    """

    iaas: str = ""
    env_id: str = ""
    no_director: bool = False
    bosh: BOSH = field(default_factory=BOSH)
    jumpbox: Jumpbox = field(default_factory=Jumpbox)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "State":
        """Create from the parsed contents of ``bbl-state.json``."""
        return cls(
            iaas=data.get("iaas", ""),
            env_id=data.get("envID", ""),
            no_director=bool(data.get("noDirector", False)),
            bosh=BOSH.from_dict(data.get("bosh") or {}),
            jumpbox=Jumpbox.from_dict(data.get("jumpbox") or {}),
        )

    def is_empty(self) -> bool:
        """True when nothing was loaded."""
        return self == State()


class StateStore:
    """Loads :class:`State` from a state directory."""

    def __init__(self, state_dir: Union[str, Path]) -> None:
        self.state_dir = Path(state_dir)
        self.state_file = self.state_dir / STATE_FILENAME

    def get(self) -> State:
        """
        Load the state file.

        Returns an empty State if the file does not exist.

        Raises:
            StateError: If the file exists but is not valid JSON
        """
        if not self.state_file.exists():
            logger.debug(f"No state file at {self.state_file}")
            return State()

        try:
            with open(self.state_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StateError(
                f"Failed to read {self.state_file}: {e}",
                details={"state_dir": str(self.state_dir)},
            ) from e

        return State.from_dict(data or {})


class StateValidator:
    """Checks that a state directory actually holds an environment."""

    def __init__(self, state_dir: Union[str, Path]) -> None:
        self.state_dir = Path(state_dir)

    def validate(self, state: State) -> None:
        """
        Raise if ``state`` is empty.

        Raises:
            StateValidationError: If no state was found in the state directory
        """
        if state.is_empty():
            raise StateValidationError(
                f"{STATE_FILENAME} not found in {self.state_dir}",
                details={"hint": "Pass --state-dir or set BBL_STATE_DIR"},
            )
