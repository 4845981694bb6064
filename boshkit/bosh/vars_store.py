"""
Readers for the BOSH vars stores kept under ``<state-dir>/vars``.

SSHKeyGetter
    Private key of a deployment's ``jumpbox_ssh`` credential.
CredhubGetter
    Credhub server URL, CA certificates and CLI password of the director.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from boshkit.core.exceptions import VarsStoreError

logger = logging.getLogger(__name__)

CREDHUB_PORT = 8844


def load_vars(path: Path) -> Dict[str, Any]:
    """Load a vars YAML file, raising VarsStoreError if it is missing or bad."""
    if not path.exists():
        raise VarsStoreError(f"Vars file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise VarsStoreError(f"Failed to read {path}: {e}") from e


def lookup(variables: Dict[str, Any], *keys: str) -> str:
    """Walk nested keys; raise VarsStoreError naming the dotted path if absent."""
    value: Any = variables
    for key in keys:
        if not isinstance(value, dict) or key not in value:
            raise VarsStoreError(f"Variable not found: {'.'.join(keys)}")
        value = value[key]
    return str(value)


class SSHKeyGetter:
    """Reads ``jumpbox_ssh.private_key`` from ``<deployment>-vars-store.yml``."""

    def __init__(self, state_dir: Union[str, Path]) -> None:
        self.vars_dir = Path(state_dir) / "vars"

    def get(self, deployment: str) -> str:
        path = self.vars_dir / f"{deployment}-vars-store.yml"
        logger.debug(f"Reading ssh key for {deployment} from {path}")
        return lookup(load_vars(path), "jumpbox_ssh", "private_key")


class CredhubGetter:
    """
    Reads credhub connection details from the director's vars files.

    Parameters
    ----------
    state_dir : str or Path
        Environment state directory; files are read from its ``vars``
        subdirectory.
    """

    def __init__(self, state_dir: Union[str, Path]) -> None:
        self.vars_dir = Path(state_dir) / "vars"

    @property
    def _vars_store(self) -> Dict[str, Any]:
        return load_vars(self.vars_dir / "director-vars-store.yml")

    def get_server(self) -> str:
        """Credhub URL on the director's internal IP."""
        variables = load_vars(self.vars_dir / "director-vars-file.yml")
        internal_ip = lookup(variables, "internal_ip")
        return f"https://{internal_ip}:{CREDHUB_PORT}"

    def get_certs(self) -> str:
        """Credhub CA followed by the UAA CA, newline separated."""
        variables = self._vars_store
        credhub_ca = lookup(variables, "credhub_tls", "ca")
        uaa_ca = lookup(variables, "uaa_ssl", "ca")
        return f"{credhub_ca}\n{uaa_ca}"

    def get_password(self) -> str:
        return lookup(self._vars_store, "credhub_cli_user_password")
