"""Reading network-to-country rows from an ipinfo-style CSV file."""

from __future__ import annotations

import ipaddress
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from typing import Union

DEFAULT_CSV = "ipinfo_lite.csv"
HEADER_FIELD = "network"

StrPath = Union[str, "PathLike[str]"]


class ParseError(ValueError):
    """A CSV line whose network field could not be parsed."""

    def __init__(self, line: str, reason: object) -> None:
        super().__init__(f"line {line}: {reason}")
        self.line = line
        self.reason = reason


@dataclass(frozen=True)
class Record:
    """One IPv4 network together with the country it belongs to."""

    network: ipaddress.IPv4Network
    country: str
    country_code: str = ""


def iter_records(lines: Iterable[str]) -> Iterator[Record]:
    """Yield IPv4 records from CSV lines, stopping at the first IPv6 network.

    A field without a prefix length is taken as a single host (/32); the
    header line is skipped.
    """
    for raw in lines:
        line = raw.removesuffix("\n").removesuffix("\r")
        fields = line.split(",")
        prefix = fields[0] if "/" in fields[0] else fields[0] + "/32"
        try:
            network = ipaddress.ip_network(prefix, strict=False)
        except ValueError as exc:
            if fields[0] == HEADER_FIELD:
                continue
            raise ParseError(line, exc) from exc
        if network.version == 6:
            return
        if len(fields) < 2:
            raise ParseError(line, "missing country field")
        code = fields[2][:2] if len(fields) > 2 else ""
        yield Record(network, fields[1], code)


def read_records(path: StrPath = DEFAULT_CSV) -> list[Record]:
    """Read all IPv4 records from the CSV file at ``path``."""
    with open(path, encoding="utf-8", newline="") as handle:
        return list(iter_records(handle))