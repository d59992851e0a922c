"""Country lookup by scanning every known IPv4 network in one mapping."""

from __future__ import annotations

import ipaddress
from typing import Optional, Union

from countryip.records import DEFAULT_CSV, StrPath, read_records

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_ADDRESS_MASK = 0xFFFFFFFF


def _parse_address(ip: str) -> Optional[Address]:
    """Return ``ip`` parsed as an address, or None if it is not one."""
    try:
        return ipaddress.ip_address(ip)
    except ValueError:
        return None


def _as_ipv4(addr: Address) -> ipaddress.IPv4Address:
    """Return ``addr`` as IPv4, unwrapping IPv4-mapped addresses."""
    if isinstance(addr, ipaddress.IPv4Address):
        return addr
    mapped = addr.ipv4_mapped
    if mapped is None:
        raise ValueError(f"{addr} is not an IPv4 address")
    return mapped


class CountryIPData:
    """Maps each IPv4 network to its country name and scans them all on lookup."""

    def __init__(self, path: StrPath = DEFAULT_CSV) -> None:
        self._subnet_countries: dict[ipaddress.IPv4Network, str] = {
            record.network: record.country for record in read_records(path)
        }

    def __len__(self) -> int:
        return len(self._subnet_countries)

    def addr_country(self, ip: str) -> str:
        """Return the country of ``ip``, or an empty string if none is known."""
        addr = _parse_address(ip)
        if addr is None:
            return ""
        return next(
            (country for subnet, country in self._subnet_countries.items() if addr in subnet),
            "",
        )