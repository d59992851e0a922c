import pytest

from countryip.v3 import CountryIPData

ROWS = ["1.0.0.0/24,Oz,AU", "2.0.0.0/24,Australia,AU", "2.0.1.0/24,China,CN"]


@pytest.fixture
def data(tmp_path):
    path = tmp_path / "codes.csv"
    path.write_text("\n".join(ROWS) + "\n", encoding="utf-8")
    return CountryIPData(path)


@pytest.mark.parametrize(
    "ip, country",
    [("1.0.0.1", "Oz"), ("2.0.0.1", "Oz"), ("2.0.1.9", "China"), ("2.0.2.0", "")],
)
def test_first_name_for_country_code_wins(data, ip, country):
    assert data.addr_country(ip) == country


def test_length_counts_networks_not_codes(data):
    assert len(data) == 3