"""
Terraform Outputs
=================

Reads the outputs of the terraform state that created an environment.

Classes
-------
Outputs
    Read-only mapping of output names to values.
OutputManager
    Runs ``terraform output -json`` in the environment's terraform
    directory.

Example
-------
>>> manager = OutputManager("/path/to/state-dir/terraform")
>>> outputs = manager.get_outputs()
>>> outputs.get_string("external_ip")
'10.0.0.5'
"""

from __future__ import annotations

import json
import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

from boshkit.core.exceptions import TerraformError

# Module logger
logger = logging.getLogger(__name__)


@dataclass
class Outputs:
    """
    Terraform outputs with typed access.

    Parameters
    ----------
    map : dict
        Output name to plain value (already unwrapped from the
        ``{"value": ...}`` envelope terraform prints).
    """

    map: Dict[str, Any] = field(default_factory=dict)

    def get_string(self, key: str) -> str:
        """
        Get an output as a string.

        Returns
        -------
        str
            The value, or ``""`` if the output is absent or null.
        """
        value = self.map.get(key)
        if value is None:
            return ""
        return str(value)

    @classmethod
    def from_terraform_json(cls, raw: Dict[str, Any]) -> "Outputs":
        """Build from the document printed by ``terraform output -json``."""
        return cls(map={name: output.get("value") for name, output in raw.items()})


class OutputManager:
    """
    Fetches terraform outputs for an environment.

    Parameters
    ----------
    terraform_dir : str or Path
        Directory holding the environment's terraform state.
    binary : str, default="terraform"
        Terraform executable to invoke.
    """

    def __init__(
        self,
        terraform_dir: Union[str, Path],
        binary: str = "terraform",
    ) -> None:
        self.terraform_dir = Path(terraform_dir)
        self.binary = binary

    def get_outputs(self) -> Outputs:
        """
        Run ``terraform output -json`` and parse the result.

        Returns
        -------
        Outputs
            Parsed outputs.

        Raises
        ------
        TerraformError
            If terraform cannot be run, exits non-zero, or prints
            something other than JSON.
        """
        cmd = [self.binary, "output", "-json"]
        logger.debug(f"Running {' '.join(cmd)} in {self.terraform_dir}")

        try:
            result = subprocess.run(
                cmd,
                cwd=self.terraform_dir,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise TerraformError(
                f"Failed to run terraform: {e}",
                details={"command": " ".join(cmd)},
            ) from e

        if result.returncode != 0:
            raise TerraformError(
                f"Failed to get terraform output: {result.stderr.strip()}",
                details={"exit_code": result.returncode},
            )

        try:
            raw = json.loads(result.stdout or "{}")
        except ValueError as e:
            raise TerraformError(f"Failed to parse terraform output: {e}") from e

        return Outputs.from_terraform_json(raw)
