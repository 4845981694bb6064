"""
Tests for the vars store readers.
"""

import pytest
import yaml

from boshkit.bosh.vars_store import CredhubGetter, SSHKeyGetter
from boshkit.core.exceptions import VarsStoreError


@pytest.fixture
def state_dir(tmp_path):
    """A state directory with jumpbox and director vars files."""
    vars_dir = tmp_path / "vars"
    vars_dir.mkdir()
    (vars_dir / "jumpbox-vars-store.yml").write_text(
        yaml.safe_dump({"jumpbox_ssh": {"private_key": "some-private-key"}})
    )
    (vars_dir / "director-vars-file.yml").write_text(
        yaml.safe_dump({"internal_ip": "10.0.0.6"})
    )
    (vars_dir / "director-vars-store.yml").write_text(
        yaml.safe_dump(
            {
                "credhub_tls": {"ca": "credhub-ca"},
                "uaa_ssl": {"ca": "uaa-ca"},
                "credhub_cli_user_password": "some-password",
            }
        )
    )
    return tmp_path


class TestSSHKeyGetter:
    """Tests for SSHKeyGetter."""

    def test_get(self, state_dir):
        """Test reading the jumpbox private key."""
        assert SSHKeyGetter(state_dir).get("jumpbox") == "some-private-key"

    def test_missing_vars_store(self, tmp_path):
        """Test that a missing vars store raises VarsStoreError."""
        with pytest.raises(VarsStoreError) as exc_info:
            SSHKeyGetter(tmp_path).get("jumpbox")

        assert "jumpbox-vars-store.yml" in exc_info.value.message

    def test_missing_key(self, state_dir):
        """Test that a missing variable names its path."""
        (state_dir / "vars" / "jumpbox-vars-store.yml").write_text("other: value\n")

        with pytest.raises(VarsStoreError) as exc_info:
            SSHKeyGetter(state_dir).get("jumpbox")

        assert exc_info.value.message == "Variable not found: jumpbox_ssh.private_key"


class TestCredhubGetter:
    """Tests for CredhubGetter."""

    def test_get_server(self, state_dir):
        """Test that the server URL uses the director internal IP."""
        assert CredhubGetter(state_dir).get_server() == "https://10.0.0.6:8844"

    def test_get_certs(self, state_dir):
        """Test that both CAs are returned."""
        assert CredhubGetter(state_dir).get_certs() == "credhub-ca\nuaa-ca"

    def test_get_password(self, state_dir):
        """Test reading the credhub CLI password."""
        assert CredhubGetter(state_dir).get_password() == "some-password"

    def test_missing_files(self, tmp_path):
        """Test that every lookup fails without vars files."""
        getter = CredhubGetter(tmp_path)
        for lookup in (getter.get_server, getter.get_certs, getter.get_password):
            with pytest.raises(VarsStoreError):
                lookup()
