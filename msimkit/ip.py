"""Discovery of this host's external and intranet IPv4 addresses."""

from __future__ import annotations

import ipaddress
import re
import socket

import psutil
import requests

EXTERNAL_IP_URL = "https://ifconfig.io/ip"
_MAX_IP_TEXT = 15
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def get_external_ip() -> str:
    """Ask an echo service for this host's public IP address."""
    resp = requests.get(EXTERNAL_IP_URL)
    text = resp.text
    if resp.status_code != 200:
        raise RuntimeError("get external ip failed")
    if len(text) > _MAX_IP_TEXT:
        raise RuntimeError("get external ip failed")
    return text.strip()


def _ipv4_of(addr) -> ipaddress.IPv4Address | None:
    if addr.family == socket.AF_INET:
        try:
            return ipaddress.IPv4Address(addr.address)
        except ValueError:
            return None
    if addr.family == socket.AF_INET6:
        try:
            v6 = ipaddress.IPv6Address(addr.address.split("%", 1)[0])
        except ValueError:
            return None
        if v6.is_loopback:
            return None
        return v6.ipv4_mapped
    return None


def get_intranet_ips() -> list[str]:
    """Private IPv4 addresses of interfaces that are up, skipping loopback and bridges."""
    stats = psutil.net_if_stats()
    ips: list[str] = []
    for name, addrs in psutil.net_if_addrs().items():
        info = stats.get(name)
        if info is None or not info.isup:
            continue
        flags = getattr(info, "flags", "") or ""
        if "loopback" in flags.split(","):
            continue
        if name.startswith("docker") or name.startswith("w-"):
            continue
        for addr in addrs:
            ip = _ipv4_of(addr)
            if ip is None or ip.is_loopback:
                continue
            text = str(ip)
            if is_intranet(text):
                ips.append(text)
    return ips


def is_intranet(ip: str) -> bool:
    """True for addresses in 10.*, 192.168.* and 172.16.* to 172.31.*."""
    if ip.startswith("10.") or ip.startswith("192.168."):
        return True
    if ip.startswith("172."):
        parts = ip.split(".")
        if len(parts) != 4:
            return False
        if not _DECIMAL.fullmatch(parts[1]):
            return False
        return 16 <= int(parts[1]) <= 31
    return False