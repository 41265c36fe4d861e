from __future__ import annotations

import json

import pytest

from conftest import FIXTURES_DIR, SAMPLE_CURRENCIES, SAMPLE_ISO3166
from generator.errors import ParseError
from generator.parsing import parse_alternate, parse_primary


def test_parse_primary_maps_wire_names() -> None:
    countries = parse_primary(SAMPLE_ISO3166)

    assert len(countries) == 2
    tc = countries[0]
    assert tc.name == "Test Country"
    assert tc.alpha2 == "TC"
    assert tc.alpha3 == "TST"
    assert tc.country_code == "999"
    assert tc.iso31662 == "ISO 3166-2:TC"
    assert tc.region == "Test Region"
    assert tc.region_code == "001"
    assert tc.sub_region == "Test Sub-Region"
    assert tc.sub_region_code == "002"
    assert tc.intermediate_region == ""
    # Filled in by the merge, not by the primary source.
    assert tc.capital == ""
    assert tc.continent_name == ""
    assert tc.currency_code == ""

    assert countries[1].intermediate_region == "Test Intermediate"
    assert countries[1].intermediate_region_code == "004"


def test_parse_primary_keeps_document_order() -> None:
    data = (FIXTURES_DIR / "test_countries.json").read_bytes()
    assert [c.alpha2 for c in parse_primary(data)] == ["CA", "DE", "US"]


def test_parse_alternate_maps_wire_names() -> None:
    alternates = parse_alternate(SAMPLE_CURRENCIES)

    assert len(alternates) == 2
    assert alternates[0].country_code == "TC"
    assert alternates[0].country_name == "Test Country"
    assert alternates[0].currency_code == "TST"
    assert alternates[0].population == "1000000"
    assert alternates[0].capital == "Test Capital"
    assert alternates[0].continent_name == "Test Continent"


def test_missing_and_null_fields_default_to_empty_string() -> None:
    data = json.dumps([{"alpha-2": "ZZ", "name": None}]).encode("utf-8")
    (c,) = parse_primary(data)

    assert c.alpha2 == "ZZ"
    assert c.name == ""
    assert c.alpha3 == ""
    assert c.iso31662 == ""


def test_unknown_fields_are_ignored() -> None:
    data = json.dumps([{"countryCode": "TC", "isoNumeric": "999", "areaInSqKm": "1.0"}]).encode("utf-8")
    (alt,) = parse_alternate(data)

    assert alt.country_code == "TC"
    assert not hasattr(alt, "isoNumeric")


def test_empty_array_is_valid() -> None:
    assert parse_primary(b"[]") == []


@pytest.mark.parametrize(
    "payload",
    [
        b"invalid json",
        b"",
        b"[{\"alpha-2\": \"TC\"",
        b"\xff\xfe\x00",
    ],
)
def test_malformed_json_raises_parse_error(payload: bytes) -> None:
    with pytest.raises(ParseError, match="failed to unmarshal countries data"):
        parse_primary(payload)


def test_alternate_parse_error_names_currency_source() -> None:
    with pytest.raises(ParseError, match="failed to unmarshal currency data"):
        parse_alternate(b"invalid json")


@pytest.mark.parametrize(
    "doc",
    [
        {"alpha-2": "TC"},
        "TC",
        [1, 2],
        [["TC"]],
        [{"alpha-2": 42}],
        [{"alpha-2": True}],
    ],
)
def test_schema_mismatch_raises_parse_error(doc: object) -> None:
    with pytest.raises(ParseError):
        parse_primary(json.dumps(doc).encode("utf-8"))
