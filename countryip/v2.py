"""Country lookup with networks grouped by the first octet of their address."""

from __future__ import annotations

import ipaddress
from collections.abc import Mapping
from typing import Optional, TypeVar

from countryip.records import DEFAULT_CSV, StrPath, read_records
from countryip.v1 import Address, _as_ipv4, _parse_address

_V = TypeVar("_V")


def _bucket_for(buckets: Mapping[int, _V], addr: Address) -> Optional[_V]:
    """Return the bucket at or below the first octet of ``addr``, never bucket 0."""
    first = _as_ipv4(addr).packed[0]
    while first > 0:
        bucket = buckets.get(first)
        if bucket is not None:
            return bucket
        first -= 1
    return None


class CountryIPData:
    """Networks bucketed by first octet; lookups scan only one bucket.

    An address is looked up in the bucket of its first octet or, failing
    that, the nearest lower one; bucket 0 is never searched.
    """

    def __init__(self, path: StrPath = DEFAULT_CSV) -> None:
        self._buckets: dict[int, dict[ipaddress.IPv4Network, str]] = {}
        for record in read_records(path):
            first = record.network.network_address.packed[0]
            self._buckets.setdefault(first, {})[record.network] = record.country

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
        return next((country for subnet, country in bucket.items() if addr in subnet), "")