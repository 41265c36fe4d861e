from __future__ import annotations

import itertools
import random
import string
from dataclasses import FrozenInstanceError

import pytest

from countries import countries_data
from countries.lookup import (
    get_all,
    get_by_alpha2,
    get_by_alpha3,
    get_by_capital,
    get_by_country_code,
    get_by_iso31662,
    get_by_name,
    get_catalog,
)
from countries.models import Country


def test_catalog_size() -> None:
    assert len(get_all()) == 249


def test_united_states_record() -> None:
    us = get_by_alpha2("US")

    assert us is not None
    assert us.name == "United States of America"
    assert us.alpha3 == "USA"
    assert us.country_code == "840"
    assert us.iso31662 == "ISO 3166-2:US"
    assert us.capital == "Washington"
    assert us.continent_name == "North America"
    assert us.currency_code == "USD"
    assert us.region == "Americas"
    assert us.sub_region == "Northern America"


@pytest.mark.parametrize(
    "lookup, key",
    [
        (get_by_name, "united states of america"),
        (get_by_name, "UNITED STATES OF AMERICA"),
        (get_by_name, "United States of America"),
        (get_by_alpha2, "us"),
        (get_by_alpha2, "Us"),
        (get_by_alpha3, "usa"),
        (get_by_alpha3, "USA"),
        (get_by_country_code, "840"),
        (get_by_iso31662, "iso 3166-2:us"),
        (get_by_iso31662, "ISO 3166-2:US"),
        (get_by_capital, "washington"),
        (get_by_capital, "WASHINGTON"),
    ],
)
def test_lookups_are_case_insensitive(lookup, key: str) -> None:
    country = lookup(key)
    assert country is not None
    assert country.alpha2 == "US"


@pytest.mark.parametrize(
    "lookup, key",
    [
        (get_by_name, "Atlantis"),
        (get_by_alpha2, "ZZ"),
        (get_by_alpha3, "ZZZ"),
        (get_by_country_code, "000"),
        (get_by_country_code, "00000"),
        (get_by_country_code, "4"),
        (get_by_iso31662, "ISO 3166-2:ZZ"),
        (get_by_capital, "Gotham"),
        (get_by_capital, ""),
    ],
)
def test_unknown_keys_return_none(lookup, key: str) -> None:
    assert lookup(key) is None


def test_country_code_is_exact_match() -> None:
    afghanistan = get_by_country_code("004")
    assert afghanistan is not None
    assert afghanistan.alpha2 == "AF"


def test_non_ascii_name_lookup() -> None:
    aland = get_by_name("ÅLAND ISLANDS")
    assert aland is not None
    assert aland.alpha2 == "AX"


@pytest.mark.parametrize(
    "capital, alpha2",
    [
        ("London", "GB"),
        ("Ottawa", "CA"),
        ("Paris", "FR"),
        ("Tokyo", "JP"),
        ("Canberra", "AU"),
        ("Brasília", "BR"),
        ("Mariehamn", "AX"),
    ],
)
def test_capital_lookup(capital: str, alpha2: str) -> None:
    country = get_by_capital(capital)
    assert country is not None
    assert country.alpha2 == alpha2


def test_shared_capital_resolves_to_first_in_catalog_order() -> None:
    kingston = get_by_capital("Kingston")
    assert kingston is not None
    assert kingston.alpha2 == "JM"
    assert get_by_alpha2("NF").capital == "Kingston"


def test_countries_without_capital_are_not_indexed() -> None:
    antarctica = get_by_alpha2("AQ")
    assert antarctica is not None
    assert antarctica.capital == ""
    assert all(c.capital for c in get_catalog().by_capital.values())


def test_get_all_returns_fresh_list() -> None:
    first = get_all()
    first.clear()

    assert len(get_all()) == 249


def test_get_all_preserves_catalog_order() -> None:
    codes = [c.alpha2 for c in get_all()]
    assert codes[:3] == ["AF", "AX", "AL"]
    assert codes[-1] == "ZW"


def test_records_are_immutable() -> None:
    us = get_by_alpha2("US")
    with pytest.raises(FrozenInstanceError):
        us.capital = "Philadelphia"  # type: ignore[misc]


def test_indices_are_read_only() -> None:
    with pytest.raises(TypeError):
        get_catalog().by_alpha2["XX"] = get_by_alpha2("US")  # type: ignore[index]


def test_catalog_is_built_once() -> None:
    assert get_catalog() is get_catalog()


def test_code_shapes() -> None:
    for country in get_all():
        assert len(country.alpha2) == 2
        assert len(country.alpha3) == 3
        assert country.alpha2.isascii() and country.alpha2.isupper()
        assert country.alpha3.isascii() and country.alpha3.isupper()


def test_alpha_codes_round_trip() -> None:
    for country in get_all():
        assert get_by_alpha2(country.alpha2) is country
        assert get_by_alpha3(country.alpha3) is country
        assert get_by_country_code(country.country_code) is country
        assert get_by_iso31662(country.iso31662) is country
        assert get_by_name(country.name) is country


def test_index_sizes() -> None:
    catalog = get_catalog()

    assert len(catalog.by_name) == 249
    assert len(catalog.by_alpha2) == 249
    assert len(catalog.by_alpha3) == 249
    assert len(catalog.by_country_code) == 249
    assert len(catalog.by_iso31662) == 249
    assert len(catalog.by_capital) >= 240
    assert len(catalog.by_capital) < 249


def test_capital_index_is_sorted() -> None:
    keys = list(countries_data.BY_CAPITAL)
    assert keys == sorted(keys)


def test_generated_constants() -> None:
    assert countries_data.ALPHA2_US == "US"
    assert countries_data.ALPHA3_USA == "USA"
    assert countries_data.ALPHA2_AX == "AX"


def test_to_dict_uses_wire_names() -> None:
    d = get_by_alpha2("US").to_dict()

    assert d["alpha-2"] == "US"
    assert d["alpha-3"] == "USA"
    assert d["country-code"] == "840"
    assert d["iso_3166-2"] == "ISO 3166-2:US"
    assert d["currency_code"] == "USD"
    assert d["sub-region"] == "Northern America"
    assert len(d) == 14


def test_country_is_plain_value_object() -> None:
    a = Country(*(["x"] * 14))
    b = Country(*(["x"] * 14))
    assert a == b
    assert hash(a) == hash(b)


def _case_variants(code: str) -> list[str]:
    return ["".join(chars) for chars in itertools.product(*((ch.lower(), ch.upper()) for ch in code))]


@pytest.mark.parametrize("code", sorted(countries_data.BY_ALPHA2))
def test_alpha2_lookup_ignores_case_for_every_code(code: str) -> None:
    for variant in _case_variants(code):
        country = get_by_alpha2(variant)
        assert country is not None
        assert country.alpha2 == variant.upper() == code


def test_random_alpha2_inputs_resolve_to_their_uppercase_form() -> None:
    rng = random.Random(3166)
    alphabet = string.ascii_letters + string.digits + " -_"
    for _ in range(2000):
        key = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 4)))
        country = get_by_alpha2(key)
        if country is not None:
            assert country.alpha2 == key.upper()
