"""Discovery of this host's IPv4 addresses."""

from __future__ import annotations

import ipaddress
import socket

import psutil


def _as_ipv4(family: int, address: str) -> ipaddress.IPv4Address | None:
    if family == socket.AF_INET:
        try:
            return ipaddress.IPv4Address(address)
        except ValueError:
            return None
    if family == socket.AF_INET6:
        try:
            ip6 = ipaddress.IPv6Address(address.split("%", 1)[0])
        except ValueError:
            return None
        return ip6.ipv4_mapped
    return None


def get_host_ip_list() -> list[str]:
    """Return the non-loopback IPv4 addresses of all network interfaces."""
    result = []
    for addresses in psutil.net_if_addrs().values():
        for addr in addresses:
            ip = _as_ipv4(addr.family, addr.address)
            if ip is not None and not ip.is_loopback:
                result.append(str(ip))
    return result