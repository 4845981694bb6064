"""
Tests for state loading and validation.
"""

import json

import pytest

from boshkit.core.exceptions import StateError, StateValidationError
from boshkit.storage.state import State, StateStore, StateValidator


@pytest.fixture
def state_dir(tmp_path):
    """A state directory holding a director environment."""
    (tmp_path / "bbl-state.json").write_text(
        json.dumps(
            {
                "iaas": "azure",
                "envID": "some-env",
                "bosh": {
                    "directorUsername": "admin",
                    "directorPassword": "secret",
                    "directorAddress": "https://10.0.0.6:25555",
                    "directorSSLCA": "-----BEGIN CERTIFICATE-----",
                },
                "jumpbox": {"url": "52.1.2.3:22"},
            }
        )
    )
    return tmp_path


class TestStateStore:
    """Tests for StateStore."""

    def test_loads_state(self, state_dir):
        """Test that camelCase keys map onto the dataclasses."""
        state = StateStore(state_dir).get()

        assert state.iaas == "azure"
        assert state.env_id == "some-env"
        assert state.no_director is False
        assert state.bosh.director_username == "admin"
        assert state.bosh.director_password == "secret"
        assert state.bosh.director_address == "https://10.0.0.6:25555"
        assert state.bosh.director_ssl_ca == "-----BEGIN CERTIFICATE-----"
        assert state.jumpbox.url == "52.1.2.3:22"

    def test_no_director(self, tmp_path):
        """Test that noDirector is read."""
        (tmp_path / "bbl-state.json").write_text('{"iaas": "azure", "noDirector": true}')
        assert StateStore(tmp_path).get().no_director is True

    def test_missing_file_gives_empty_state(self, tmp_path):
        """Test that a missing file is not an error."""
        state = StateStore(tmp_path).get()
        assert state.is_empty()

    def test_invalid_json(self, tmp_path):
        """Test that a corrupt file raises StateError."""
        (tmp_path / "bbl-state.json").write_text("{not json")

        with pytest.raises(StateError):
            StateStore(tmp_path).get()


class TestStateValidator:
    """Tests for StateValidator."""

    def test_empty_state_fails(self, tmp_path):
        """Test that an empty state is rejected."""
        with pytest.raises(StateValidationError) as exc_info:
            StateValidator(tmp_path).validate(State())

        assert "bbl-state.json not found" in exc_info.value.message

    def test_loaded_state_passes(self, state_dir):
        """Test that a loaded state is accepted."""
        StateValidator(state_dir).validate(StateStore(state_dir).get())
