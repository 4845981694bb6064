"""
Tests for the print-env command.
"""

import os
import re

import pytest

from boshkit.commands.print_env import PrintEnv, Severity, StepResult, run_step
from boshkit.storage.state import State
from boshkit.terraform.outputs import Outputs


@pytest.fixture
def print_env(
    logger,
    stderr_logger,
    state_validator,
    ssh_key_getter,
    credhub_getter,
    terraform_manager,
    file_io,
):
    return PrintEnv(
        logger,
        stderr_logger,
        state_validator,
        ssh_key_getter,
        credhub_getter,
        terraform_manager,
        file_io,
    )


def matching(messages, pattern):
    return [m for m in messages if re.match(pattern, m)]


class TestRunStep:
    """Tests for the step result helper."""

    def test_success(self):
        """Test that a successful lookup carries its value."""
        result = run_step(lambda: "value", Severity.WARNING, "warn")
        assert result.ok
        assert not result.fatal
        assert result.value == "value"

    def test_warning_failure_is_not_fatal(self):
        """Test that a failed WARNING step is recoverable."""
        result = run_step(lambda: 1 / 0, Severity.WARNING, "warn")
        assert not result.ok
        assert not result.fatal
        assert isinstance(result.error, ZeroDivisionError)

    def test_fatal_failure(self):
        """Test that a failed FATAL step is fatal."""
        result = StepResult(severity=Severity.FATAL, error=ValueError("x"))
        assert result.fatal


class TestCheckFastFails:
    """Tests for PrintEnv.check_fast_fails."""

    def test_validator_error_propagates(self, print_env, state_validator):
        """Test that the validator's error is raised unchanged."""
        error = RuntimeError("failed to validate state")
        state_validator.error = error

        with pytest.raises(RuntimeError) as exc_info:
            print_env.check_fast_fails([], State())

        assert exc_info.value is error

    def test_valid_state(self, print_env, state_validator, director_state):
        """Test that a valid state passes."""
        print_env.check_fast_fails([], director_state)
        assert state_validator.received == [director_state]


class TestExecute:
    """Tests for PrintEnv.execute."""

    def test_prints_bosh_and_credhub_variables(
        self, print_env, logger, ssh_key_getter, director_state
    ):
        """Test the full set of export lines."""
        print_env.execute([], director_state)

        assert ssh_key_getter.deployments == ["jumpbox"]

        messages = logger.messages
        assert "export BOSH_CLIENT=some-director-username" in messages
        assert "export BOSH_CLIENT_SECRET=some-director-password" in messages
        assert "export BOSH_CA_CERT='some-director-ca-cert'" in messages
        assert "export BOSH_ENVIRONMENT=some-director-address" in messages

        assert "export CREDHUB_SERVER=some-credhub-server" in messages
        assert "export CREDHUB_CA_CERT='some-credhub-certs'" in messages
        assert "export CREDHUB_USER=credhub-cli" in messages
        assert "export CREDHUB_PASSWORD=some-credhub-password" in messages

        assert matching(
            messages, r"export JUMPBOX_PRIVATE_KEY=.*[/\\]bosh_jumpbox_private.key"
        )
        assert (
            "export BOSH_ALL_PROXY=ssh+socks5://jumpbox@some-magical-jumpbox-url:22"
            "?private-key=$JUMPBOX_PRIVATE_KEY"
        ) in messages

    def test_line_order(self, print_env, logger, director_state):
        """Test director lines, then credhub lines, then jumpbox lines."""
        print_env.execute([], director_state)

        names = [m.split("=", 1)[0].replace("export ", "") for m in logger.messages]
        assert names == [
            "BOSH_CLIENT",
            "BOSH_CLIENT_SECRET",
            "BOSH_CA_CERT",
            "BOSH_ENVIRONMENT",
            "CREDHUB_SERVER",
            "CREDHUB_CA_CERT",
            "CREDHUB_USER",
            "CREDHUB_PASSWORD",
            "JUMPBOX_PRIVATE_KEY",
            "BOSH_ALL_PROXY",
        ]

    def test_writes_private_key_to_file_in_temp_dir(
        self, print_env, logger, file_io, director_state
    ):
        """Test that the key is written where JUMPBOX_PRIVATE_KEY points."""
        print_env.execute([], director_state)

        expected_path = os.path.join("some-temp-dir", "bosh_jumpbox_private.key")
        assert f"export JUMPBOX_PRIVATE_KEY={expected_path}" in logger.messages
        assert file_io.writes == [
            {"filename": expected_path, "contents": b"some-private-key"}
        ]

    def test_no_director_prints_only_bosh_environment(
        self, print_env, logger, terraform_manager
    ):
        """Test that only the environment URL is printed without a director."""
        terraform_manager.outputs = Outputs(map={"external_ip": "1.2.3.4"})

        print_env.execute([], State(no_director=True))

        assert terraform_manager.call_count == 1
        assert logger.messages == ["export BOSH_ENVIRONMENT=https://1.2.3.4:25555"]

    def test_terraform_outputs_failure(self, print_env, terraform_manager):
        """Test that a terraform failure propagates unchanged."""
        error = RuntimeError("failed to get terraform output")
        terraform_manager.error = error

        with pytest.raises(RuntimeError) as exc_info:
            print_env.execute([], State(no_director=True))

        assert exc_info.value is error

    def test_ssh_key_getter_failure(self, print_env, logger, ssh_key_getter):
        """Test that a jumpbox key failure aborts before the jumpbox lines."""
        error = RuntimeError("papaya")
        ssh_key_getter.error = error

        with pytest.raises(RuntimeError) as exc_info:
            print_env.execute([], State())

        assert exc_info.value is error
        assert not matching(logger.messages, r"export JUMPBOX_PRIVATE_KEY=")
        assert not matching(logger.messages, r"export BOSH_ALL_PROXY=")

    def test_private_key_write_failure(self, print_env, logger, file_io):
        """Test that a key file write failure aborts the command."""
        error = OSError("mango")
        file_io.write_error = error

        with pytest.raises(OSError) as exc_info:
            print_env.execute([], State())

        assert exc_info.value is error
        assert not matching(logger.messages, r"export JUMPBOX_PRIVATE_KEY=")

    def test_temp_dir_failure(self, print_env, file_io):
        """Test that a temp dir failure aborts the command."""
        file_io.temp_dir_error = OSError("no space left")

        with pytest.raises(OSError):
            print_env.execute([], State())

    @pytest.mark.parametrize(
        "attribute, warning, missing",
        [
            ("password_error", "No credhub password found.", "export CREDHUB_PASSWORD="),
            ("server_error", "No credhub server found.", "export CREDHUB_SERVER="),
            ("certs_error", "No credhub certs found.", "export CREDHUB_CA_CERT="),
        ],
    )
    def test_credhub_failures_only_warn(
        self,
        print_env,
        logger,
        stderr_logger,
        credhub_getter,
        director_state,
        attribute,
        warning,
        missing,
    ):
        """Test that a credhub failure warns and the rest is still printed."""
        setattr(credhub_getter, attribute, RuntimeError("fig"))

        print_env.execute([], director_state)

        assert stderr_logger.messages == [warning]
        assert not matching(logger.messages, re.escape(missing))
        assert matching(logger.messages, r"export JUMPBOX_PRIVATE_KEY=")
        assert "export BOSH_CLIENT=some-director-username" in logger.messages

    def test_credhub_failures_are_independent(
        self, print_env, logger, stderr_logger, credhub_getter, director_state
    ):
        """Test that every failed lookup warns on its own."""
        credhub_getter.server_error = RuntimeError("starfruit")
        credhub_getter.certs_error = RuntimeError("kiwi")
        credhub_getter.password_error = RuntimeError("fig")

        print_env.execute([], director_state)

        assert stderr_logger.messages == [
            "No credhub server found.",
            "No credhub certs found.",
            "No credhub password found.",
        ]
        assert not matching(logger.messages, r"export CREDHUB_")
        assert matching(logger.messages, r"export BOSH_ALL_PROXY=")
