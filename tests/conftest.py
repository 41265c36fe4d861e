from __future__ import annotations

from pathlib import Path

import pytest

from generator.generator import CountryDataGenerator, GeneratorConfig


FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures" / "sources"

SAMPLE_ISO3166 = b"""[
  {
    "name": "Test Country",
    "alpha-2": "TC",
    "alpha-3": "TST",
    "country-code": "999",
    "iso_3166-2": "ISO 3166-2:TC",
    "region": "Test Region",
    "sub-region": "Test Sub-Region",
    "intermediate-region": "",
    "region-code": "001",
    "sub-region-code": "002",
    "intermediate-region-code": ""
  },
  {
    "name": "Another Country",
    "alpha-2": "AC",
    "alpha-3": "ANO",
    "country-code": "998",
    "iso_3166-2": "ISO 3166-2:AC",
    "region": "Test Region",
    "sub-region": "Another Sub-Region",
    "intermediate-region": "Test Intermediate",
    "region-code": "001",
    "sub-region-code": "003",
    "intermediate-region-code": "004"
  }
]"""

SAMPLE_CURRENCIES = b"""[
  {
    "countryCode": "TC",
    "countryName": "Test Country",
    "currencyCode": "TST",
    "population": "1000000",
    "capital": "Test Capital",
    "continentName": "Test Continent"
  },
  {
    "countryCode": "AC",
    "countryName": "Another Country",
    "currencyCode": "ANO",
    "population": "2000000",
    "capital": "Another Capital",
    "continentName": "Another Continent"
  }
]"""

SIMPLE_TEMPLATE = """# Test Template
from countries.models import Country

COUNTRIES = (
${countries}
)

BY_ALPHA2 = {
${by_alpha2}
}
"""


class MemoryDataLoader:
    def __init__(
        self,
        primary: bytes = SAMPLE_ISO3166,
        alternate: bytes = SAMPLE_CURRENCIES,
        *,
        primary_error: Exception | None = None,
        alternate_error: Exception | None = None,
    ) -> None:
        self.primary = primary
        self.alternate = alternate
        self.primary_error = primary_error
        self.alternate_error = alternate_error

    def load_primary_data(self) -> bytes:
        if self.primary_error is not None:
            raise self.primary_error
        return self.primary

    def load_alternate_data(self) -> bytes:
        if self.alternate_error is not None:
            raise self.alternate_error
        return self.alternate


class MemoryFileWriter:
    def __init__(self, *, error: Exception | None = None) -> None:
        self.files: dict[str, bytes] = {}
        self.error = error

    def write(self, path: str, content: bytes) -> None:
        if self.error is not None:
            raise self.error
        self.files[path] = content


class MemoryTemplateProvider:
    def __init__(self, template: str = SIMPLE_TEMPLATE, *, error: Exception | None = None) -> None:
        self.template = template
        self.error = error

    def get_package_template(self) -> str:
        if self.error is not None:
            raise self.error
        return self.template


@pytest.fixture()
def loader() -> MemoryDataLoader:
    return MemoryDataLoader()


@pytest.fixture()
def writer() -> MemoryFileWriter:
    return MemoryFileWriter()


@pytest.fixture()
def template_provider() -> MemoryTemplateProvider:
    return MemoryTemplateProvider()


@pytest.fixture()
def generator(
    loader: MemoryDataLoader,
    writer: MemoryFileWriter,
    template_provider: MemoryTemplateProvider,
) -> CountryDataGenerator:
    return CountryDataGenerator(
        GeneratorConfig(
            data_loader=loader,
            file_writer=writer,
            template_provider=template_provider,
            output_path="test_output.py",
            repo_url="https://example.invalid/repo",
        )
    )
