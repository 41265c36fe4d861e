from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from countries.models import Country


@dataclass(frozen=True)
class Catalog:
    """
    Immutable view over the generated country data.

    Built once per process (get_catalog) and never mutated afterwards, so it is
    safe to share between threads without locking.
    """

    countries: tuple[Country, ...]
    by_name: Mapping[str, Country]
    by_alpha2: Mapping[str, Country]
    by_alpha3: Mapping[str, Country]
    by_country_code: Mapping[str, Country]
    by_iso31662: Mapping[str, Country]
    by_capital: Mapping[str, Country]


def _resolve(countries: tuple[Country, ...], index: Mapping[str, int]) -> Mapping[str, Country]:
    return MappingProxyType({key: countries[pos] for key, pos in index.items()})


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    from countries import countries_data as data

    countries = tuple(data.COUNTRIES)
    return Catalog(
        countries=countries,
        by_name=_resolve(countries, data.BY_NAME),
        by_alpha2=_resolve(countries, data.BY_ALPHA2),
        by_alpha3=_resolve(countries, data.BY_ALPHA3),
        by_country_code=_resolve(countries, data.BY_COUNTRY_CODE),
        by_iso31662=_resolve(countries, data.BY_ISO31662),
        by_capital=_resolve(countries, data.BY_CAPITAL),
    )


def get_by_name(name: str) -> Country | None:
    """Case-insensitive match on the full ISO name, e.g. "united states of america"."""
    return get_catalog().by_name.get(name.lower())


def get_by_alpha2(alpha2: str) -> Country | None:
    return get_catalog().by_alpha2.get(alpha2.upper())


def get_by_alpha3(alpha3: str) -> Country | None:
    return get_catalog().by_alpha3.get(alpha3.upper())


def get_by_country_code(code: str) -> Country | None:
    # Numeric codes are matched exactly ("004", not "4").
    return get_catalog().by_country_code.get(code)


def get_by_iso31662(iso: str) -> Country | None:
    return get_catalog().by_iso31662.get(iso.upper())


def get_by_capital(capital: str) -> Country | None:
    return get_catalog().by_capital.get(capital.lower())


def get_all() -> list[Country]:
    """All countries in catalog order. Returns a new list on every call."""
    return list(get_catalog().countries)
