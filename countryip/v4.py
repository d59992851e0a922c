"""Country lookup by binary search over sorted integer address ranges."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass
from operator import attrgetter

from countryip.records import DEFAULT_CSV, StrPath, read_records
from countryip.v1 import _as_ipv4, _parse_address

_net_addr = attrgetter("net_addr")


@dataclass(frozen=True, slots=True)
class IPv4SubnetCountry:
    """An inclusive IPv4 address range and the code of its country."""

    net_addr: int
    last_addr: int
    country_code: str

    def __contains__(self, value: int) -> bool:
        return self.net_addr <= value <= self.last_addr


def _read_ranges(path: StrPath) -> tuple[list[IPv4SubnetCountry], dict[str, str]]:
    """Return the sorted ranges in ``path`` and the first name seen per country code."""
    countries_by_cc: dict[str, str] = {}
    ranges: list[IPv4SubnetCountry] = []
    for record in read_records(path):
        countries_by_cc.setdefault(record.country_code, record.country)
        network = record.network
        ranges.append(
            IPv4SubnetCountry(
                int(network.network_address),
                int(network.broadcast_address),
                record.country_code,
            )
        )
    ranges.sort(key=_net_addr)
    return ranges, countries_by_cc


def _lookup(
    ranges: Sequence[IPv4SubnetCountry], countries_by_cc: dict[str, str], ip: str
) -> str:
    """Return the country of ``ip`` among sorted ``ranges``, or an empty string."""
    addr = _parse_address(ip)
    if addr is None:
        return ""
    value = int(_as_ipv4(addr))
    index = bisect_right(ranges, value, key=_net_addr) - 1
    if index < 0 or value not in ranges[index]:
        return ""
    return countries_by_cc.get(ranges[index].country_code, "")


class CountryIPData:
    """Sorted address ranges searched by bisection.

    Country names are stored once per country code; the first name seen
    for a code is the one that is kept.
    """

    def __init__(self, path: StrPath = DEFAULT_CSV) -> None:
        ranges, self._countries_by_cc = _read_ranges(path)
        self._subnet_countries: tuple[IPv4SubnetCountry, ...] = tuple(ranges)

    def __len__(self) -> int:
        return len(self._subnet_countries)

    def addr_country(self, ip: str) -> str:
        """Return the country of ``ip``, or an empty string if none is known.

        Raises ValueError for an IPv6 address that is not IPv4-mapped.
        """
        return _lookup(self._subnet_countries, self._countries_by_cc, ip)