"""Bucketed country lookup storing each country name once per country code."""

from __future__ import annotations

import ipaddress

from countryip.records import DEFAULT_CSV, StrPath, read_records
from countryip.v1 import _parse_address
from countryip.v2 import _bucket_for


class CountryIPData:
    """Networks bucketed by first octet, mapped to country codes.

    The first name seen for a country code is the one that is kept.
    """

    def __init__(self, path: StrPath = DEFAULT_CSV) -> None:
        self._countries_by_cc: dict[str, str] = {}
        self._buckets: dict[int, dict[ipaddress.IPv4Network, str]] = {}
        for record in read_records(path):
            self._countries_by_cc.setdefault(record.country_code, record.country)
            first = record.network.network_address.packed[0]
            self._buckets.setdefault(first, {})[record.network] = record.country_code

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def addr_country(self, ip: str) -> str:
        """Return the country of ``ip``, or an empty string if none is known.

        Raises ValueError for an IPv6 address that is not IPv4-mapped.
        """
        addr = _parse_address(ip)
        if addr is None:
            return ""
        bucket = _bucket_for(self._buckets, addr)
        if bucket is None:
            return ""
        code = next((code for subnet, code in bucket.items() if addr in subnet), None)
        return "" if code is None else self._countries_by_cc.get(code, "")