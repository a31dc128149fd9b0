"""
Tests for ClientIpConfig and the exception classes
"""

import pytest

from clientip import ClientIpConfig, ClientIpError, ClientIpNotFoundError


class TestClientIpConfig:
    """Test ClientIpConfig validation"""

    def test_defaults(self):
        config = ClientIpConfig()
        assert config.attribute_name == "client_ip"
        assert config.exclude_paths is None
        assert config.required is False
        assert config.status_code == 400

    @pytest.mark.parametrize("name", ["", "client-ip", "1ip", "client ip", None])
    def test_invalid_attribute_name(self, name):
        with pytest.raises(ValueError, match="attribute_name"):
            ClientIpConfig(attribute_name=name)

    @pytest.mark.parametrize("status", [200, 302, 600])
    def test_invalid_status_code(self, status):
        with pytest.raises(ValueError, match="status_code"):
            ClientIpConfig(status_code=status)

    def test_exclude_paths_normalized_to_set(self):
        config = ClientIpConfig(exclude_paths=["/health", "/health", "/metrics"])
        assert config.exclude_paths == {"/health", "/metrics"}

    def test_is_excluded(self):
        config = ClientIpConfig(exclude_paths={"/health"})
        assert config.is_excluded("/health")
        assert not config.is_excluded("/api")
        assert not ClientIpConfig().is_excluded("/health")


class TestExceptions:
    """Test clientip exception classes"""

    def test_basic_creation(self):
        error = ClientIpError("Test error")
        assert str(error) == "Test error"
        assert error.source is None
        assert error.metadata == {}

    def test_with_context(self):
        error = ClientIpError("Bad header", source="x-forwarded-for", value="garbage")
        assert error.source == "x-forwarded-for"
        assert error.metadata["value"] == "garbage"

    def test_repr(self):
        repr_str = repr(ClientIpError("Test", source="x-real-ip"))
        assert "ClientIpError" in repr_str
        assert "x-real-ip" in repr_str

    def test_not_found_default_message(self):
        error = ClientIpNotFoundError()
        assert isinstance(error, ClientIpError)
        assert str(error) == "Client IP could not be determined"
