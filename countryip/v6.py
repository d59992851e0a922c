"""Country lookup over a sorted list of range starts, gaps filled with empty entries."""

from __future__ import annotations

import ipaddress
from bisect import bisect_right

from countryip.records import DEFAULT_CSV, StrPath, read_records
from countryip.v1 import _ADDRESS_MASK, _as_ipv4, _parse_address

_INITIAL_LAST_ADDR = 0x00FFFFFF  # 0.255.255.255
_NO_COUNTRY = ""


def network_ip(net_addr: int) -> str:
    """Return the dotted-quad form of a 32-bit IPv4 address."""
    return str(ipaddress.IPv4Address(net_addr))


class CountryIPData:
    """Range starts only; each range runs up to the start of the next one.

    Gaps between networks are filled with entries that carry no country.
    A range is extended when the next network is adjacent and of the same
    country. The last name seen for a country code is the one that is kept.
    """

    def __init__(self, path: StrPath = DEFAULT_CSV) -> None:
        self._countries_by_cc: dict[str, str] = {}
        starts: list[int] = [0]
        codes: list[str] = [_NO_COUNTRY]
        prev_last = _INITIAL_LAST_ADDR

        for record in read_records(path):
            code = record.country_code
            self._countries_by_cc[code] = record.country

            net_addr = int(record.network.network_address)
            following = (prev_last + 1) & _ADDRESS_MASK

            if following != net_addr:
                starts.extend((following, net_addr))
                codes.extend((_NO_COUNTRY, code))
            elif codes[-1] != code:
                starts.append(net_addr)
                codes.append(code)
            prev_last = int(record.network.broadcast_address)

        self._subnets: tuple[int, ...] = tuple(starts)
        self._country_codes: tuple[str, ...] = tuple(codes)

    def __len__(self) -> int:
        return len(self._subnets)

    def addr_country(self, ip: str) -> str:
        """Return the country of ``ip``, or an empty string if none is known.

        Raises ValueError for an IPv6 address that is not IPv4-mapped.
        """
        addr = _parse_address(ip)
        if addr is None:
            return ""
        index = bisect_right(self._subnets, int(_as_ipv4(addr))) - 1
        return self._countries_by_cc.get(self._country_codes[index], "")