from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from generator.errors import ParseError


class _SourceRecord(BaseModel):
    # Wire names are aliases; unknown keys are dropped.
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class CountryRecord(_SourceRecord):
    """
    One ISO-3166 country from the primary source.

    capital / continent_name / currency_code are absent from the primary source
    and filled in by the merge step.
    """

    alpha2: str = Field("", alias="alpha-2")
    alpha3: str = Field("", alias="alpha-3")
    country_code: str = Field("", alias="country-code")
    iso31662: str = Field("", alias="iso_3166-2")
    name: str = ""
    region: str = ""
    region_code: str = Field("", alias="region-code")
    sub_region: str = Field("", alias="sub-region")
    sub_region_code: str = Field("", alias="sub-region-code")
    intermediate_region: str = Field("", alias="intermediate-region")
    intermediate_region_code: str = Field("", alias="intermediate-region-code")
    capital: str = ""
    continent_name: str = ""
    currency_code: str = ""


class AlternateRecord(_SourceRecord):
    country_code: str = Field("", alias="countryCode")
    country_name: str = Field("", alias="countryName")
    currency_code: str = Field("", alias="currencyCode")
    population: str = ""
    capital: str = ""
    continent_name: str = Field("", alias="continentName")


RecordT = TypeVar("RecordT", bound=_SourceRecord)


def _parse_records(data: bytes, model: type[RecordT], *, source: str) -> list[RecordT]:
    try:
        doc = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ParseError(f"failed to unmarshal {source} data: {e}") from e

    if not isinstance(doc, list):
        raise ParseError(f"failed to unmarshal {source} data: expected a JSON array, got {type(doc).__name__}")

    records: list[RecordT] = []
    for pos, item in enumerate(doc):
        if not isinstance(item, dict):
            raise ParseError(f"failed to unmarshal {source} data: item {pos} is not an object")
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            raise ParseError(f"failed to unmarshal {source} data: item {pos}: {e}") from e
    return records


def parse_primary(data: bytes) -> list[CountryRecord]:
    """ISO-3166 JSON array -> CountryRecord list, document order."""
    return _parse_records(data, CountryRecord, source="countries")


def parse_alternate(data: bytes) -> list[AlternateRecord]:
    """Country info (currency / capital / continent) JSON array -> AlternateRecord list."""
    return _parse_records(data, AlternateRecord, source="currency")
