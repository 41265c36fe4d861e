from __future__ import annotations

from dataclasses import dataclass, fields


# Python field -> wire name of the merged record.
WIRE_NAMES: dict[str, str] = {
    "alpha2": "alpha-2",
    "alpha3": "alpha-3",
    "capital": "capital",
    "continent_name": "continent_name",
    "country_code": "country-code",
    "currency_code": "currency_code",
    "intermediate_region": "intermediate-region",
    "intermediate_region_code": "intermediate-region-code",
    "iso31662": "iso_3166-2",
    "name": "name",
    "region": "region",
    "region_code": "region-code",
    "sub_region": "sub-region",
    "sub_region_code": "sub-region-code",
}


@dataclass(frozen=True)
class Country:
    """A single country (ISO-3166) merged with capital / continent / currency data."""

    alpha2: str
    alpha3: str
    capital: str
    continent_name: str
    country_code: str
    currency_code: str
    intermediate_region: str
    intermediate_region_code: str
    iso31662: str
    name: str
    region: str
    region_code: str
    sub_region: str
    sub_region_code: str

    def to_dict(self) -> dict[str, str]:
        return {WIRE_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}
