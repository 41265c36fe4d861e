from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from generator.parsing import CountryRecord


@dataclass(frozen=True)
class CapitalIndexEntry:
    key: str
    index: int


def build_capital_index(countries: Sequence[CountryRecord]) -> list[CapitalIndexEntry]:
    """
    Lowercased capital -> catalog position, sorted by key.

    Duplicate capitals resolve to the earliest country in catalog order
    (e.g. "kingston" -> Jamaica, not Norfolk Island).
    """
    seen: set[str] = set()
    entries: list[CapitalIndexEntry] = []

    for index, country in enumerate(countries):
        if not country.capital:
            continue
        key = country.capital.lower()
        if key in seen:
            continue
        seen.add(key)
        entries.append(CapitalIndexEntry(key=key, index=index))

    entries.sort(key=lambda e: e.key)
    return entries
