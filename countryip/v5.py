"""Binary-search country lookup with adjacent same-country ranges merged."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from countryip import v4
from countryip.records import DEFAULT_CSV, StrPath
from countryip.v1 import _ADDRESS_MASK


class IPv4SubnetCountry(v4.IPv4SubnetCountry):
    """An inclusive IPv4 address range, possibly merged, and its country code."""

    __slots__ = ()


def _combine(ranges: Iterable[v4.IPv4SubnetCountry]) -> list[IPv4SubnetCountry]:
    """Merge each range into the previous one when adjacent and of the same country."""
    combined: list[IPv4SubnetCountry] = []
    prev: Optional[v4.IPv4SubnetCountry] = None
    for this in ranges:
        if (
            prev is None
            or prev.country_code != this.country_code
            or (prev.last_addr + 1) & _ADDRESS_MASK != this.net_addr
        ):
            combined.append(IPv4SubnetCountry(this.net_addr, this.last_addr, this.country_code))
        else:
            last = combined[-1]
            combined[-1] = IPv4SubnetCountry(last.net_addr, this.last_addr, last.country_code)
        prev = this
    return combined


class CountryIPData:
    """Sorted, merged address ranges searched by bisection.

    The first name seen for a country code is the one that is kept.
    """

    def __init__(self, path: StrPath = DEFAULT_CSV) -> None:
        ranges, self._countries_by_cc = v4._read_ranges(path)
        self._subnet_countries: tuple[IPv4SubnetCountry, ...] = tuple(_combine(ranges))

    def __len__(self) -> int:
        return len(self._subnet_countries)

    def addr_country(self, ip: str) -> str:
        """Return the country of ``ip``, or an empty string if none is known.

        Raises ValueError for an IPv6 address that is not IPv4-mapped.
        """
        return v4._lookup(self._subnet_countries, self._countries_by_cc, ip)