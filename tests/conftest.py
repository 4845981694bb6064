"""
Pytest configuration and shared fixtures for testing.

Collaborators are replaced by small hand-written fakes that record what
they receive and return whatever the test configures.
"""

from types import SimpleNamespace

import pytest

from boshkit.storage.state import BOSH, Jumpbox, State
from boshkit.terraform.outputs import Outputs


class FakeLogger:
    """Records println lines and answers prompts from a fixed policy."""

    def __init__(self, answer=True):
        self.messages = []
        self.prompts = []
        self.answer = answer

    def println(self, message):
        self.messages.append(message)

    def prompt_with_details(self, resource_type, name):
        self.prompts.append((resource_type, name))
        if callable(self.answer):
            return self.answer(resource_type, name)
        return self.answer


class FakePoller:
    def __init__(self, error=None):
        self.error = error

    def result(self):
        if self.error:
            raise self.error


class FakeGroupsClient:
    """Stands in for ResourceManagementClient.resource_groups."""

    def __init__(self, names=(), list_error=None):
        self.names = list(names)
        self.list_error = list_error
        self.list_calls = []
        self.deleted = []
        self.delete_errors = {}

    def list(self, filter=None, top=None):
        self.list_calls.append({"filter": filter, "top": top})
        if self.list_error:
            raise self.list_error
        return iter(SimpleNamespace(name=name) for name in self.names)

    def begin_delete(self, name):
        self.deleted.append(name)
        return FakePoller(self.delete_errors.get(name))


class FakeStateValidator:
    def __init__(self):
        self.error = None
        self.received = []

    def validate(self, state):
        self.received.append(state)
        if self.error:
            raise self.error


class FakeTerraformManager:
    def __init__(self):
        self.outputs = Outputs()
        self.error = None
        self.call_count = 0

    def get_outputs(self):
        self.call_count += 1
        if self.error:
            raise self.error
        return self.outputs


class FakeSSHKeyGetter:
    def __init__(self):
        self.private_key = "some-private-key"
        self.error = None
        self.deployments = []

    def get(self, deployment):
        self.deployments.append(deployment)
        if self.error:
            raise self.error
        return self.private_key


class FakeCredhubGetter:
    def __init__(self):
        self.server = "some-credhub-server"
        self.certs = "some-credhub-certs"
        self.password = "some-credhub-password"
        self.server_error = None
        self.certs_error = None
        self.password_error = None

    def get_server(self):
        if self.server_error:
            raise self.server_error
        return self.server

    def get_certs(self):
        if self.certs_error:
            raise self.certs_error
        return self.certs

    def get_password(self):
        if self.password_error:
            raise self.password_error
        return self.password


class FakeFileIO:
    def __init__(self):
        self.temp_dir_name = "some-temp-dir"
        self.temp_dir_error = None
        self.write_error = None
        self.writes = []

    def temp_dir(self):
        if self.temp_dir_error:
            raise self.temp_dir_error
        return self.temp_dir_name

    def write_file(self, filename, contents):
        self.writes.append({"filename": filename, "contents": contents})
        if self.write_error:
            raise self.write_error


@pytest.fixture
def logger():
    """Primary (stdout) fake logger."""
    return FakeLogger()


@pytest.fixture
def stderr_logger():
    """Secondary (stderr) fake logger."""
    return FakeLogger()


@pytest.fixture
def groups_client():
    """Fake resource group operations with a few groups."""
    return FakeGroupsClient(names=["bbl-env-rg", "other-rg", "bbl-env-2-rg"])


@pytest.fixture
def state_validator():
    return FakeStateValidator()


@pytest.fixture
def terraform_manager():
    return FakeTerraformManager()


@pytest.fixture
def ssh_key_getter():
    return FakeSSHKeyGetter()


@pytest.fixture
def credhub_getter():
    return FakeCredhubGetter()


@pytest.fixture
def file_io():
    return FakeFileIO()


@pytest.fixture
def director_state():
    """A state with a director and a jumpbox."""
    return State(
        iaas="azure",
        env_id="some-env",
        bosh=BOSH(
            director_username="some-director-username",
            director_password="some-director-password",
            director_address="some-director-address",
            director_ssl_ca="some-director-ca-cert",
        ),
        jumpbox=Jumpbox(url="some-magical-jumpbox-url:22"),
    )
