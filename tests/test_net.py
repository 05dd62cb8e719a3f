"""Tests for SocketAddress parsing and formatting."""

import ipaddress

import pytest

from env_vars_config.net import SocketAddress


class TestSocketAddressParse:
    def test_ipv4(self):
        addr = SocketAddress.parse("127.0.0.1:9090")
        assert addr.ip == ipaddress.IPv4Address("127.0.0.1")
        assert addr.port == 9090

    def test_ipv6_in_brackets(self):
        addr = SocketAddress.parse("[::1]:8080")
        assert addr.ip == ipaddress.IPv6Address("::1")
        assert addr.port == 8080

    def test_surrounding_whitespace_is_ignored(self):
        assert SocketAddress.parse(" 0.0.0.0:80 ").port == 80

    @pytest.mark.parametrize(
        "text",
        ["127.0.0.1", "localhost:80", "127.0.0.1:http", "127.0.0.1:70000", "[::1]8080", "::1:80"],
    )
    def test_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            SocketAddress.parse(text)


class TestSocketAddressFormat:
    def test_str_ipv4(self):
        assert str(SocketAddress.parse("0.0.0.0:8080")) == "0.0.0.0:8080"

    def test_str_ipv6_keeps_brackets(self):
        assert str(SocketAddress.parse("[::1]:443")) == "[::1]:443"

    def test_equality_by_value(self):
        assert SocketAddress.parse("10.0.0.1:1") == SocketAddress(ipaddress.ip_address("10.0.0.1"), 1)
