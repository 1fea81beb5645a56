"""Tests for public IP lookup and request info, with HTTP stubbed out."""

from __future__ import annotations

import io
import urllib.error
from datetime import datetime

import pytest

from core import network_utils
from core.network_utils import (
    PublicIps,
    get_public_ips,
    get_public_ipv4,
    get_public_ipv6,
    request_info,
)


@pytest.fixture
def http(monkeypatch):
    """Map url -> bytes body or exception; records requested urls."""
    responses: dict = {}
    calls: list = []

    def fake_urlopen(req, timeout=None):
        calls.append(req.full_url)
        assert req.get_header("User-agent") == network_utils.USER_AGENT
        body = responses.get(req.full_url, urllib.error.URLError("unreachable"))
        if isinstance(body, Exception):
            raise body
        return io.BytesIO(body)

    monkeypatch.setattr(network_utils.urllib.request, "urlopen", fake_urlopen)
    return responses, calls


IPV4_URL = "https://api.ipify.org?format=json"
IPV6_URL = "https://api6.ipify.org?format=json"
IPV6_FALLBACK = "https://ipv6.icanhazip.com/"


def test_ipv4_from_ipify(http):
    responses, calls = http
    responses[IPV4_URL] = b'{"ip": "203.0.113.7"}'
    assert get_public_ipv4() == "203.0.113.7"
    assert calls == [IPV4_URL]


def test_ipv4_unavailable(http):
    assert get_public_ipv4() is None


def test_ipv4_rejects_non_ip_body(http):
    responses, _ = http
    responses[IPV4_URL] = b'{"ip": "not-an-ip"}'
    assert get_public_ipv4() is None


def test_ipv6_from_ipify(http):
    responses, calls = http
    responses[IPV6_URL] = b'{"ip": "2001:db8::1"}'
    assert get_public_ipv6() == "2001:db8::1"
    assert calls == [IPV6_URL]


def test_ipv6_falls_back_to_icanhazip(http):
    responses, calls = http
    responses[IPV6_FALLBACK] = b"2001:db8::2\n"
    assert get_public_ipv6() == "2001:db8::2"
    assert calls == [IPV6_URL, IPV6_FALLBACK]


def test_ipv6_falls_back_on_bad_json(http):
    responses, _ = http
    responses[IPV6_URL] = b"<html>oops</html>"
    responses[IPV6_FALLBACK] = b"2001:db8::3"
    assert get_public_ipv6() == "2001:db8::3"


def test_ipv6_ignores_ipv4_answer(http):
    responses, _ = http
    responses[IPV6_URL] = b'{"ip": "203.0.113.7"}'
    responses[IPV6_FALLBACK] = b"203.0.113.7"
    assert get_public_ipv6() is None


def test_get_public_ips(http):
    responses, _ = http
    responses[IPV4_URL] = b'{"ip": "203.0.113.7"}'
    responses[IPV6_URL] = b'{"ip": "2001:db8::1"}'
    ips = get_public_ips()
    assert ips == PublicIps(ipv4="203.0.113.7", ipv6="2001:db8::1")
    assert ips.found


def test_get_public_ips_nothing_found(http):
    ips = get_public_ips()
    assert ips == PublicIps()
    assert not ips.found


def test_request_info_reads_headers_case_insensitively():
    now = datetime(2026, 10, 19, 8, 30, 0)
    info = request_info({"User-Agent": "Mozilla/5.0", "Accept-Language": "en-US,en;q=0.9"}, now=now)
    assert info == {
        "User Agent": "Mozilla/5.0",
        "Languages": "en-US,en;q=0.9",
        "Retrieved At": "2026-10-19 08:30:00",
    }


def test_request_info_without_headers():
    info = request_info(None)
    assert info["User Agent"] == "Unknown"
    assert info["Languages"] == "Unknown"
    assert info["Retrieved At"]
