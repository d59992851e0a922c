import pytest

from countryip import v1
from countryip.records import ParseError

SAMPLE_CSV = """\
network,country,country_code,continent,continent_code
1.0.0.0/24,Australia,AU,Oceania,OC
1.0.1.0/24,China,CN,Asia,AS
1.7.168.0/24,Singapore,SG,Asia,AS
1.200.0.0/16,Taiwan,TW,Asia,AS
1.255.240.0/20,South Korea,KR,Asia,AS
9.9.9.9,Switzerland,CH,Europe,EU
29.0.0.0/8,United States,US,North America,NA
83.250.0.0/16,Sweden,SE,Europe,EU
162.0.0.0/24,Canada,CA,North America,NA
223.255.255.0/24,Australia,AU,Oceania,OC
2001:200::/32,Japan,JP,Asia,AS
8.8.8.0/24,United States,US,North America,NA
"""

IP_TESTS = [
    ("0.0.0.0", ""),
    ("0.255.255.255", ""),
    ("1.0.0.0", "Australia"),
    ("1.0.0.1", "Australia"),
    ("1.0.0.2", "Australia"),
    ("1.0.0.255", "Australia"),
    ("1.0.1.0", "China"),
    ("1.7.168.174", "Singapore"),
    ("1.255.240.200", "South Korea"),
    ("1.200.0.200", "Taiwan"),
    ("162.0.0.200", "Canada"),
    ("10.10.10.10", ""),
    ("100.100.100.100", ""),
    ("192.168.123.123", ""),
    ("172.25.4.5", ""),
    ("223.255.255.253", "Australia"),
    ("223.255.255.254", "Australia"),
    ("223.255.255.255", "Australia"),
    ("29.1.2.3", "United States"),
    ("83.250.95.17", "Sweden"),
]

EDGES = [("9.9.9.9", "Switzerland"), ("9.9.9.10", ""), ("8.8.8.8", "")]


@pytest.fixture(scope="module")
def sample_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("sample") / "ipinfo_lite.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.mark.parametrize("ip, country", IP_TESTS + EDGES)
def test_lookup(sample_path, ip, country):
    assert v1.CountryIPData(sample_path).addr_country(ip) == country


@pytest.mark.parametrize("ip", ["not an ip", "", "1.2.3", "256.1.1.1"])
def test_invalid_address_gives_empty(sample_path, ip):
    assert v1.CountryIPData(sample_path).addr_country(ip) == ""


def test_length(sample_path):
    assert len(v1.CountryIPData(sample_path)) == 10


def test_ipv4_mapped_address_is_unknown(sample_path):
    assert v1.CountryIPData(sample_path).addr_country("::ffff:83.250.95.17") == ""


def test_plain_ipv6_is_unknown_to_full_scan(sample_path):
    assert v1.CountryIPData(sample_path).addr_country("2001:200::1") == ""


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        v1.CountryIPData(tmp_path / "absent.csv")


def test_bad_line(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("1.0.0.0/24,Australia,AU\ngarbage,X,XX\n", encoding="utf-8")
    with pytest.raises(ParseError):
        v1.CountryIPData(path)


def test_duplicate_prefix_keeps_last(tmp_path):
    path = tmp_path / "dup.csv"
    path.write_text("1.0.0.0/24,Oz,AU\n1.0.0.0/24,Australia,AU\n", encoding="utf-8")
    lookup = v1.CountryIPData(path)
    assert len(lookup) == 1
    assert lookup.addr_country("1.0.0.5") == "Australia"