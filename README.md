# countryip

Find the country that an IPv4 address belongs to, using the network list from
an ipinfo "lite" CSV file.

The package holds seven lookup structures, `countryip.v1` to `countryip.v7`.
Each module has a `CountryIPData` class with the same interface; they differ in
how the networks are stored and searched:

| Module | Structure |
| ------ | --------- |
| `v1` | One mapping of every network to its country name; every lookup scans it |
| `v2` | Networks grouped in buckets by the first octet of their address |
| `v3` | As `v2`, with networks mapped to country codes and one name per code |
| `v4` | Sorted integer address ranges (`IPv4SubnetCountry`) searched by bisection |
| `v5` | As `v4`, with adjacent ranges of the same country merged into one |
| `v6` | Range starts only, with entries without a country filling the gaps |
| `v7` | Range starts stored in a four-level mapping, one level per octet |

## Input format

A CSV file whose first line is a header beginning with `network`, followed by
lines such as

```
network,country,country_code,...
1.0.0.0/24,Australia,AU,...
```

A network without a `/` is taken as a single address (`/32`). Reading stops at
the first IPv6 network, so only the IPv4 part of the file is loaded. The
country code is the first two characters of the third field.

## Usage

```python
from countryip.v5 import CountryIPData

data = CountryIPData("ipinfo_lite.csv")
print(len(data))                         # number of stored entries
print(data.addr_country("1.0.0.1"))      # the country name, e.g. "Australia"
print(data.addr_country("192.168.1.1"))  # "" when no network covers the address
```

`CountryIPData()` with no argument reads `ipinfo_lite.csv` from the current
directory. A missing file raises the usual `OSError`; a line whose network
field cannot be parsed, or which has no country field, raises
`countryip.records.ParseError` (a `ValueError`) while loading.

`addr_country(ip)` returns the country name, or an empty string when the
address is not covered or `ip` is not a valid address at all. In `v2` to `v7`
an IPv4-mapped IPv6 address is looked up as its IPv4 address, and any other
IPv6 address raises `ValueError`.

`len(data)` counts what the structure stores: networks in `v1` to `v4`, merged
ranges in `v5`, and range starts (gap entries included) in `v6` and `v7`.

Some behaviour differs between the structures:

- `v2` and `v3` search the bucket of the address's first octet or, if there is
  none, the nearest lower one; bucket 0 is never searched, so addresses in
  `0.0.0.0/8` give an empty string.
- When one country code appears with several names, `v3`, `v4` and `v5` keep
  the first name seen and `v6` and `v7` keep the last.
- In `v6` and `v7` each range runs up to the start of the next one, and the
  last range reaches the end of the address space.

`countryip.v6.network_ip(net_addr)` turns a 32-bit integer into dotted-quad
form:

```python
from countryip.v6 import network_ip

network_ip(16777216)  # "1.0.0.0"
```

## Reading the CSV directly

```python
from countryip.records import iter_records, read_records

for record in read_records("ipinfo_lite.csv"):
    print(record.network, record.country, record.country_code)
```

`iter_records(lines)` does the same for any iterable of lines and yields
`Record` objects lazily.

## What it does not do

There is no command-line tool; the package is a library only. It does not
download or update the CSV file, and it does not look up IPv6 addresses.

## Running the tests

```
pip install -e ".[test]"
pytest
```