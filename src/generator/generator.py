from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass, replace
from pathlib import Path

from generator.capitals import CapitalIndexEntry, build_capital_index
from generator.errors import GenerationError
from generator.emitter import emit_source
from generator.interfaces import DataLoader, FileWriter, TemplateProvider
from generator.merge import merge_alternates
from generator.parsing import AlternateRecord, CountryRecord, parse_alternate, parse_primary
from utils.logging import get_logger


logger = get_logger(component="generator")


@dataclass(frozen=True)
class GeneratorConfig:
    data_loader: DataLoader
    file_writer: FileWriter
    template_provider: TemplateProvider
    output_path: str | Path
    repo_url: str


@dataclass(frozen=True)
class GenerationResult:
    output_path: str
    countries: int
    alternates: int
    matched: int
    capitals: int
    bytes_written: int


class CountryDataGenerator:
    """
    Builds countries/countries_data.py from the two JSON sources.

    Pipeline (sequential, deterministic):
      load -> parse -> merge -> capital index -> emit -> write

    Every failure is fatal for the run and surfaces as a GenerationError
    subclass (LoadError, ParseError, TemplateError, FormatError, OutputWriteError).
    """

    def __init__(self, config: GeneratorConfig) -> None:
        self.data_loader = config.data_loader
        self.file_writer = config.file_writer
        self.template_provider = config.template_provider
        self.output_path = str(config.output_path)
        self.repo_url = config.repo_url

    def load_countries(self) -> list[CountryRecord]:
        return parse_primary(self.data_loader.load_primary_data())

    def load_alternates(self) -> list[AlternateRecord]:
        return parse_alternate(self.data_loader.load_alternate_data())

    def merge_data(self, countries: Sequence[CountryRecord], alternates: Sequence[AlternateRecord]) -> int:
        matched = merge_alternates(countries, alternates)
        logger.info("merge_complete", countries=len(countries), alternates=len(alternates), matched=matched)
        return matched

    def generate_capital_index(self, countries: Sequence[CountryRecord]) -> list[CapitalIndexEntry]:
        entries = build_capital_index(countries)
        logger.info("capital_index_built", capitals=len(entries))
        return entries

    def generate_code(self, countries: Sequence[CountryRecord], capitals: Sequence[CapitalIndexEntry]) -> str:
        template = self.template_provider.get_package_template()
        return emit_source(countries, capitals, template=template, repo_url=self.repo_url)

    def write_output(self, code: str) -> int:
        content = code.encode("utf-8")
        self.file_writer.write(self.output_path, content)
        logger.info("output_written", path=self.output_path, bytes=len(content))
        return len(content)

    def render(self) -> tuple[str, GenerationResult]:
        """Run every stage except the write. Used by generate() and by the --check mode."""
        try:
            countries = self.load_countries()
        except GenerationError as e:
            raise e.with_context("failed to load countries") from e

        try:
            alternates = self.load_alternates()
        except GenerationError as e:
            raise e.with_context("failed to load currencies") from e

        logger.info("sources_loaded", countries=len(countries), alternates=len(alternates))

        matched = self.merge_data(countries, alternates)
        capitals = self.generate_capital_index(countries)

        try:
            code = self.generate_code(countries, capitals)
        except GenerationError as e:
            raise e.with_context("failed to generate code") from e

        logger.info("code_emitted", countries=len(countries), capitals=len(capitals), chars=len(code))
        result = GenerationResult(
            output_path=self.output_path,
            countries=len(countries),
            alternates=len(alternates),
            matched=matched,
            capitals=len(capitals),
            bytes_written=0,
        )
        return code, result

    def generate(self) -> GenerationResult:
        code, result = self.render()

        try:
            written = self.write_output(code)
        except GenerationError as e:
            raise e.with_context("failed to write output") from e

        result = replace(result, bytes_written=written)
        logger.info("generation_complete", **asdict(result))
        return result
