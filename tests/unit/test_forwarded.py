"""
Tests for X-Forwarded-For parsing
"""

import pytest

from clientip import parse_forwarded_for, split_forwarded_for


class TestParseForwardedFor:
    """Test parse_forwarded_for"""

    def test_left_most_address_is_returned(self):
        """The originating client comes first"""
        value = "203.0.113.5, 70.41.3.18, 150.172.238.178"
        assert parse_forwarded_for(value) == "203.0.113.5"

    def test_skips_unknown(self):
        assert parse_forwarded_for("unknown, 70.41.3.18") == "70.41.3.18"

    def test_skips_garbage_entries(self):
        assert parse_forwarded_for("not-an-ip, , 999.1.1.1, 9.9.9.9") == "9.9.9.9"

    def test_strips_ipv4_port(self):
        assert parse_forwarded_for("1.2.3.4:5678") == "1.2.3.4"

    def test_strips_port_on_later_entries(self):
        assert parse_forwarded_for("unknown, 5.6.7.8:443") == "5.6.7.8"

    def test_keeps_bare_ipv6(self):
        assert parse_forwarded_for("2001:db8::1, 1.2.3.4") == "2001:db8::1"

    def test_bracketed_ipv6_with_port_is_not_an_address(self):
        assert parse_forwarded_for("[2001:db8::1]:443") is None

    def test_whitespace_is_trimmed(self):
        assert parse_forwarded_for("   10.0.0.1  ,10.0.0.2") == "10.0.0.1"

    def test_no_valid_entries(self):
        assert parse_forwarded_for("unknown, unknown") is None

    @pytest.mark.parametrize("value", [None, "", 42, ["1.2.3.4"]])
    def test_missing_or_non_string(self, value):
        assert parse_forwarded_for(value) is None


class TestSplitForwardedFor:
    """Test split_forwarded_for"""

    def test_preserves_order_and_entries(self):
        tokens = split_forwarded_for(" unknown , 1.2.3.4:80 ,2001:db8::1,")
        assert tokens == ["unknown", "1.2.3.4", "2001:db8::1", ""]

    def test_non_string(self):
        assert split_forwarded_for(None) == []
        assert split_forwarded_for(b"1.2.3.4") == []
