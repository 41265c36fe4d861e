from __future__ import annotations

from conftest import SAMPLE_CURRENCIES, SAMPLE_ISO3166
from generator.merge import merge_alternates
from generator.parsing import AlternateRecord, CountryRecord, parse_alternate, parse_primary


def _country(alpha2: str, **kw: str) -> CountryRecord:
    return CountryRecord(alpha2=alpha2, **kw)


def _alt(code: str, capital: str, continent: str = "", currency: str = "") -> AlternateRecord:
    return AlternateRecord(country_code=code, capital=capital, continent_name=continent, currency_code=currency)


def test_merge_copies_capital_continent_currency() -> None:
    countries = parse_primary(SAMPLE_ISO3166)
    alternates = parse_alternate(SAMPLE_CURRENCIES)

    matched = merge_alternates(countries, alternates)

    assert matched == 2
    assert countries[0].capital == "Test Capital"
    assert countries[0].continent_name == "Test Continent"
    assert countries[0].currency_code == "TST"
    assert countries[1].capital == "Another Capital"
    assert countries[1].continent_name == "Another Continent"
    assert countries[1].currency_code == "ANO"


def test_merge_leaves_other_fields_untouched() -> None:
    countries = parse_primary(SAMPLE_ISO3166)
    before = countries[0].model_dump(exclude={"capital", "continent_name", "currency_code"})

    merge_alternates(countries, parse_alternate(SAMPLE_CURRENCIES))

    assert countries[0].model_dump(exclude={"capital", "continent_name", "currency_code"}) == before


def test_unmatched_country_keeps_empty_fields() -> None:
    countries = [_country("AQ", name="Antarctica"), _country("TC")]
    matched = merge_alternates(countries, [_alt("TC", "Test Capital", "Test Continent", "TST")])

    assert matched == 1
    assert countries[0].capital == ""
    assert countries[0].continent_name == ""
    assert countries[0].currency_code == ""


def test_first_matching_alternate_wins() -> None:
    countries = [_country("TC")]
    alternates = [
        _alt("TC", "First Capital", "First Continent", "AAA"),
        _alt("TC", "Second Capital", "Second Continent", "BBB"),
    ]

    merge_alternates(countries, alternates)

    assert countries[0].capital == "First Capital"
    assert countries[0].continent_name == "First Continent"
    assert countries[0].currency_code == "AAA"


def test_alternates_without_country_are_ignored() -> None:
    countries = [_country("US")]
    matched = merge_alternates(countries, [_alt("XK", "Pristina"), _alt("US", "Washington")])

    assert matched == 1
    assert countries[0].capital == "Washington"


def test_join_key_is_case_sensitive() -> None:
    countries = [_country("TC")]
    assert merge_alternates(countries, [_alt("tc", "Lowercase Capital")]) == 0
    assert countries[0].capital == ""


def test_empty_inputs() -> None:
    assert merge_alternates([], [_alt("TC", "x")]) == 0
    countries = [_country("TC")]
    assert merge_alternates(countries, []) == 0
