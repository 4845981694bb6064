"""
Print Env Command
=================

Prints the shell ``export`` statements that point the ``bosh`` and
``credhub`` CLIs at an environment through its jumpbox.

Classes
-------
Severity
    Whether a failed lookup aborts the command or only warns.
StepResult
    Outcome of a single lookup.
PrintEnv
    The command itself.

Example
-------
>>> print_env = PrintEnv(
...     logger, stderr_logger, state_validator, ssh_key_getter,
...     credhub_getter, terraform_manager, file_io,
... )
>>> print_env.check_fast_fails([], state)
>>> print_env.execute([], state)

Notes
-----
Director and jumpbox lookups are mandatory: their failures propagate
unchanged. Credhub lookups are optional: a failure prints a warning on
the stderr logger and the line is omitted.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional

from boshkit.storage.state import State

# Module logger
logger = logging.getLogger(__name__)

JUMPBOX_DEPLOYMENT = "jumpbox"
PRIVATE_KEY_FILENAME = "bosh_jumpbox_private.key"
DIRECTOR_PORT = 25555
CREDHUB_USER = "credhub-cli"


class Severity(Enum):
    """How a failed step affects the command."""

    FATAL = "fatal"
    WARNING = "warning"


@dataclass
class StepResult:
    """
    Outcome of a single lookup performed by :class:`PrintEnv`.

    Parameters
    ----------
    severity : Severity
        What a failure of this step means.
    value : str, optional
        The looked-up value when the step succeeded.
    error : Exception, optional
        The collaborator's exception when the step failed.
    warning : str, optional
        Message printed to the stderr logger for a failed
        ``WARNING`` step.
    """

    severity: Severity
    value: Optional[str] = None
    error: Optional[Exception] = None
    warning: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True if the step succeeded."""
        return self.error is None

    @property
    def fatal(self) -> bool:
        """True if the step failed and the command must stop."""
        return not self.ok and self.severity is Severity.FATAL


def run_step(
    lookup: Callable[[], Any],
    severity: Severity = Severity.FATAL,
    warning: Optional[str] = None,
) -> StepResult:
    """
    Run ``lookup`` and capture its outcome.

    Parameters
    ----------
    lookup : callable
        Zero-argument function returning the value.
    severity : Severity, default=Severity.FATAL
        Severity attached to a failure.
    warning : str, optional
        Warning text for a failed ``WARNING`` step.

    Returns
    -------
    StepResult
        The value on success, the exception on failure.
    """
    try:
        return StepResult(severity=severity, value=lookup(), warning=warning)
    except Exception as e:
        logger.debug(f"Lookup failed ({severity.value}): {e}")
        return StepResult(severity=severity, error=e, warning=warning)


class PrintEnv:
    """
    Prints environment variables for the bosh and credhub CLIs.

    Parameters
    ----------
    logger : object
        Primary sink exposing ``println``; receives ``export`` lines.
    stderr_logger : object
        Secondary sink exposing ``println``; receives warnings.
    state_validator : object
        Exposes ``validate(state)``.
    ssh_key_getter : object
        Exposes ``get(deployment) -> str``.
    credhub_getter : object
        Exposes ``get_server``, ``get_certs`` and ``get_password``.
    terraform_manager : object
        Exposes ``get_outputs() -> Outputs``.
    file_io : object
        Exposes ``temp_dir() -> str`` and ``write_file(path, bytes)``.
    """

    def __init__(
        self,
        logger: Any,
        stderr_logger: Any,
        state_validator: Any,
        ssh_key_getter: Any,
        credhub_getter: Any,
        terraform_manager: Any,
        file_io: Any,
    ) -> None:
        self.logger = logger
        self.stderr_logger = stderr_logger
        self.state_validator = state_validator
        self.ssh_key_getter = ssh_key_getter
        self.credhub_getter = credhub_getter
        self.terraform_manager = terraform_manager
        self.file_io = file_io

    def check_fast_fails(self, args: List[str], state: State) -> None:
        """
        Validate the state before executing.

        Raises
        ------
        Exception
            Whatever the state validator raised, unchanged.
        """
        self.state_validator.validate(state)

    def execute(self, args: List[str], state: State) -> None:
        """
        Print the export statements for ``state``.

        Raises
        ------
        Exception
            The collaborator's exception, unchanged, if the terraform
            outputs, the jumpbox key, or the key file write fail.
        """
        if state.no_director:
            outputs = self._require(run_step(self.terraform_manager.get_outputs))
            external_ip = outputs.get_string("external_ip")
            self._export("BOSH_ENVIRONMENT", f"https://{external_ip}:{DIRECTOR_PORT}")
            return

        self._export("BOSH_CLIENT", state.bosh.director_username)
        self._export("BOSH_CLIENT_SECRET", state.bosh.director_password)
        self._export("BOSH_CA_CERT", state.bosh.director_ssl_ca, quoted=True)
        self._export("BOSH_ENVIRONMENT", state.bosh.director_address)

        server = run_step(
            self.credhub_getter.get_server,
            Severity.WARNING,
            "No credhub server found.",
        )
        if self._optional(server):
            self._export("CREDHUB_SERVER", server.value)

        certs = run_step(
            self.credhub_getter.get_certs,
            Severity.WARNING,
            "No credhub certs found.",
        )
        if self._optional(certs):
            self._export("CREDHUB_CA_CERT", certs.value, quoted=True)

        password = run_step(
            self.credhub_getter.get_password,
            Severity.WARNING,
            "No credhub password found.",
        )
        if self._optional(password):
            self._export("CREDHUB_USER", CREDHUB_USER)
            self._export("CREDHUB_PASSWORD", password.value)

        private_key = self._require(
            run_step(lambda: self.ssh_key_getter.get(JUMPBOX_DEPLOYMENT))
        )
        temp_dir = self._require(run_step(self.file_io.temp_dir))
        key_path = os.path.join(temp_dir, PRIVATE_KEY_FILENAME)
        self._require(
            run_step(lambda: self.file_io.write_file(key_path, private_key.encode()))
        )

        self._export("JUMPBOX_PRIVATE_KEY", key_path)
        self._export(
            "BOSH_ALL_PROXY",
            f"ssh+socks5://jumpbox@{state.jumpbox.url}"
            "?private-key=$JUMPBOX_PRIVATE_KEY",
        )

    def _require(self, result: StepResult) -> Any:
        # Collaborator exceptions propagate as-is.
        if result.fatal:
            raise result.error
        return result.value

    def _optional(self, result: StepResult) -> bool:
        if not result.ok:
            self.stderr_logger.println(result.warning)
        return result.ok

    def _export(self, name: str, value: str, quoted: bool = False) -> None:
        if quoted:
            value = f"'{value}'"
        self.logger.println(f"export {name}={value}")
