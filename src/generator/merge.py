from __future__ import annotations

from collections.abc import Sequence

from generator.parsing import AlternateRecord, CountryRecord


def merge_alternates(countries: Sequence[CountryRecord], alternates: Sequence[AlternateRecord]) -> int:
    """
    Enrich countries in place with capital / continent / currency from the alternate source.

    - Join key: country.alpha2 == alternate.country_code
    - First matching alternate wins; later duplicates are ignored.
    - Countries without a match keep empty strings (e.g. uninhabited territories).

    Returns the number of countries that found a match.
    """
    matched = 0
    for country in countries:
        for alt in alternates:
            if alt.country_code != country.alpha2:
                continue
            country.capital = alt.capital
            country.continent_name = alt.continent_name
            country.currency_code = alt.currency_code
            matched += 1
            break
    return matched
