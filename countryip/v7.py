"""Country lookup through a four-level mapping keyed by each address octet."""

from __future__ import annotations

import ipaddress

from countryip.records import DEFAULT_CSV, StrPath, read_records

_MASK = 0xFFFFFFFF
_INITIAL_LAST_ADDR = 0x00FFFFFF  # 0.255.255.255
_NO_COUNTRY = ""

_Tree = dict[int, dict[int, dict[int, dict[int, str]]]]


def _ipv4_octets(addr: ipaddress.IPv4Address | ipaddress.IPv6Address) -> bytes:
    if addr.version == 4:
        return addr.packed
    mapped = addr.ipv4_mapped
    if mapped is None:
        raise ValueError(f"{addr} is not an IPv4 address")
    return mapped.packed


def _floor_key(mapping: dict, octet: int) -> int:
    """Step ``octet`` down until it is a key of ``mapping`` or reaches zero."""
    while octet > 0 and octet not in mapping:
        octet -= 1
    return octet


class CountryIPData:
    """Range starts stored octet by octet in nested mappings.

    Gaps between networks get entries without a country, adjacent networks
    of the same country share one entry, and the last name seen for a
    country code is the one that is kept.
    """

    def __init__(self, path: StrPath = DEFAULT_CSV) -> None:
        self._subnets: _Tree = {}
        self._countries_by_cc: dict[str, str] = {}
        self._count = 0

        self._insert(0, _NO_COUNTRY)
        prev_code = _NO_COUNTRY
        prev_last = _INITIAL_LAST_ADDR

        for record in read_records(path):
            code = record.country_code
            self._countries_by_cc[code] = record.country

            net_addr = int(record.network.network_address)
            last_addr = int(record.network.broadcast_address)
            following = (prev_last + 1) & _MASK

            if prev_code == code and following == net_addr:
                prev_last = last_addr
                continue

            if following != net_addr:
                self._insert(following, _NO_COUNTRY)
            self._insert(net_addr, code)

            prev_last = last_addr
            prev_code = code

    def _insert(self, net_addr: int, code: str) -> None:
        a, b, c, d = net_addr.to_bytes(4, "big")
        self._subnets.setdefault(a, {}).setdefault(b, {}).setdefault(c, {})[d] = code
        self._count += 1

    def __len__(self) -> int:
        return self._count

    def addr_country(self, ip: str) -> str:
        """Return the country of ``ip``, or an empty string if none is known.

        Raises ValueError for an IPv6 address that is not IPv4-mapped.
        """
        try:
            addr = ipaddress.ip_address(ip)
        except ValueError:
            return ""
        a, b, c, d = _ipv4_octets(addr)

        first = _floor_key(self._subnets, a)
        level2 = self._subnets.get(first, {})
        second = _floor_key(level2, b)
        level3 = level2.get(second, {})
        third = _floor_key(level3, c)
        level4 = level3.get(third, {})
        fourth = _floor_key(level4, d)
        code = level4.get(fourth, _NO_COUNTRY)
        return self._countries_by_cc.get(code, "")