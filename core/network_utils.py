# core/network_utils.py
from __future__ import annotations
import json, logging, ipaddress, urllib.request
from dataclasses import dataclass
from datetime import datetime
from typing import List, Mapping, Tuple

logger = logging.getLogger(__name__)

USER_AGENT = "devtools-hub/1.0"

# (url, kind, json key)
IPV4_SOURCES: List[Tuple[str, str, str | None]] = [
    ("https://api.ipify.org?format=json", "json", "ip"),
]
IPV6_SOURCES: List[Tuple[str, str, str | None]] = [
    ("https://api6.ipify.org?format=json", "json", "ip"),
    ("https://ipv6.icanhazip.com/", "text", None),
]


@dataclass(frozen=True)
class PublicIps:
    ipv4: str | None = None
    ipv6: str | None = None

    @property
    def found(self) -> bool:
        return bool(self.ipv4 or self.ipv6)


# --------- Helpers ---------
def _fetch_ip(url: str, kind: str, key: str | None, timeout: float = 5) -> str | None:
    req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    with urllib.request.urlopen(req, timeout=timeout) as r:
        raw = r.read().decode("utf-8", errors="ignore").strip()
    if kind == "json":
        return (json.loads(raw).get(key) or "").strip() or None
    return raw or None


def _ip_version(ip: str | None) -> int | None:
    if not ip:
        return None
    try:
        return ipaddress.ip_address(ip).version
    except ValueError:
        return None


def _first_ip(sources: List[Tuple[str, str, str | None]], version: int) -> str | None:
    for url, kind, key in sources:
        try:
            ip = _fetch_ip(url, kind, key)
        except (OSError, ValueError, AttributeError) as e:
            # try the next source
            logger.debug("IP lookup via %s failed: %s", url, e)
            continue
        if _ip_version(ip) == version:
            return ip
        logger.debug("IP lookup via %s returned no IPv%d address: %r", url, version, ip)
    return None


# --------- Public IP ---------
def get_public_ipv4() -> str | None:
    return _first_ip(IPV4_SOURCES, 4)


def get_public_ipv6() -> str | None:
    """IPv6 seen by the outside world, or None when the host has no IPv6 route."""
    return _first_ip(IPV6_SOURCES, 6)


def get_public_ips() -> PublicIps:
    ipv4 = get_public_ipv4()
    ipv6 = get_public_ipv6()
    if ipv6 == ipv4:
        ipv6 = None
    if not (ipv4 or ipv6):
        logger.warning("No public IP could be resolved")
    return PublicIps(ipv4=ipv4, ipv6=ipv6)


# --------- Request info ---------
def request_info(headers: Mapping[str, str] | None, now: datetime | None = None) -> dict:
    """User agent and languages of the requesting browser, plus retrieval time."""
    lowered = {str(k).lower(): v for k, v in (headers or {}).items()}
    ts = (now or datetime.now().astimezone()).strftime("%Y-%m-%d %H:%M:%S %Z").strip()
    return {
        "User Agent": lowered.get("user-agent") or "Unknown",
        "Languages": lowered.get("accept-language") or "Unknown",
        "Retrieved At": ts,
    }
