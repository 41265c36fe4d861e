from __future__ import annotations

from generator.capitals import CapitalIndexEntry, build_capital_index
from generator.parsing import CountryRecord


def _countries(*capitals: str) -> list[CountryRecord]:
    return [CountryRecord(name=f"Country {i}", capital=cap) for i, cap in enumerate(capitals)]


def test_capital_index_sorted_deduped_and_skips_empty() -> None:
    countries = _countries("Washington", "Ottawa", "Berlin", "", "Washington")

    capitals = build_capital_index(countries)

    assert capitals == [
        CapitalIndexEntry(key="berlin", index=2),
        CapitalIndexEntry(key="ottawa", index=1),
        CapitalIndexEntry(key="washington", index=0),
    ]


def test_duplicate_capital_points_at_earliest_record() -> None:
    caps = [f"City {i}" for i in range(100)]
    caps[5] = "Washington"
    caps[80] = "Washington"

    capitals = build_capital_index(_countries(*caps))
    washington = [e for e in capitals if e.key == "washington"]

    assert washington == [CapitalIndexEntry(key="washington", index=5)]


def test_duplicate_detection_is_case_insensitive() -> None:
    capitals = build_capital_index(_countries("KINGSTON", "Kingston"))
    assert capitals == [CapitalIndexEntry(key="kingston", index=0)]


def test_keys_are_lowercased_including_non_ascii() -> None:
    capitals = build_capital_index(_countries("Brasília", "Øresund"))
    assert [e.key for e in capitals] == ["brasília", "øresund"]


def test_order_does_not_depend_on_catalog_order() -> None:
    a = build_capital_index(_countries("Paris", "Lima", "Oslo"))
    b = build_capital_index(_countries("Oslo", "Paris", "Lima"))

    assert [e.key for e in a] == [e.key for e in b] == ["lima", "oslo", "paris"]


def test_empty_catalog() -> None:
    assert build_capital_index([]) == []
