from __future__ import annotations

import ast

import pytest

from conftest import MemoryDataLoader, MemoryFileWriter, MemoryTemplateProvider
from generator.errors import (
    FormatError,
    GenerationError,
    LoadError,
    OutputWriteError,
    ParseError,
    TemplateError,
)
from generator.generator import CountryDataGenerator, GenerationResult, GeneratorConfig


def _generator(
    *,
    loader: MemoryDataLoader | None = None,
    writer: MemoryFileWriter | None = None,
    provider: MemoryTemplateProvider | None = None,
) -> CountryDataGenerator:
    return CountryDataGenerator(
        GeneratorConfig(
            data_loader=loader or MemoryDataLoader(),
            file_writer=writer or MemoryFileWriter(),
            template_provider=provider or MemoryTemplateProvider(),
            output_path="test_output.py",
            repo_url="https://example.invalid/repo",
        )
    )


def test_generate_writes_merged_catalog(generator: CountryDataGenerator, writer: MemoryFileWriter) -> None:
    result = generator.generate()

    assert list(writer.files) == ["test_output.py"]
    content = writer.files["test_output.py"]
    code = content.decode("utf-8")
    ast.parse(code)

    assert "Test Country" in code
    assert "Test Capital" in code
    assert "Test Continent" in code
    assert '"TC": 0' in code
    assert '"AC": 1' in code

    assert result == GenerationResult(
        output_path="test_output.py",
        countries=2,
        alternates=2,
        matched=2,
        capitals=2,
        bytes_written=len(content),
    )


def test_generate_is_byte_identical_across_runs() -> None:
    first, second = MemoryFileWriter(), MemoryFileWriter()
    _generator(writer=first).generate()
    _generator(writer=second).generate()

    assert first.files == second.files


def test_render_does_not_write(generator: CountryDataGenerator, writer: MemoryFileWriter) -> None:
    code, result = generator.render()

    assert writer.files == {}
    assert result.bytes_written == 0
    assert result.countries == 2
    assert code.endswith("\n")


def test_pipeline_stages_can_run_individually(generator: CountryDataGenerator) -> None:
    countries = generator.load_countries()
    alternates = generator.load_alternates()

    assert generator.merge_data(countries, alternates) == 2
    capitals = generator.generate_capital_index(countries)
    assert [e.key for e in capitals] == ["another capital", "test capital"]

    code = generator.generate_code(countries, capitals)
    assert generator.write_output(code) == len(code.encode("utf-8"))


def test_unmatched_countries_are_still_emitted() -> None:
    loader = MemoryDataLoader(alternate=b"[]")
    writer = MemoryFileWriter()
    result = _generator(loader=loader, writer=writer).generate()

    assert result.matched == 0
    assert result.capitals == 0
    code = writer.files["test_output.py"].decode("utf-8")
    assert 'capital="",' in code


def test_primary_load_failure_is_wrapped() -> None:
    loader = MemoryDataLoader(primary_error=LoadError("disk on fire"))
    writer = MemoryFileWriter()

    with pytest.raises(LoadError, match=r"^failed to load countries: disk on fire$"):
        _generator(loader=loader, writer=writer).generate()
    assert writer.files == {}


def test_primary_parse_failure_is_wrapped() -> None:
    loader = MemoryDataLoader(primary=b"invalid json")

    with pytest.raises(ParseError, match="^failed to load countries: failed to unmarshal countries data"):
        _generator(loader=loader).generate()


def test_alternate_failures_are_wrapped() -> None:
    with pytest.raises(LoadError, match="^failed to load currencies: nope$"):
        _generator(loader=MemoryDataLoader(alternate_error=LoadError("nope"))).generate()

    with pytest.raises(ParseError, match="^failed to load currencies: failed to unmarshal currency data"):
        _generator(loader=MemoryDataLoader(alternate=b"{}")).generate()


def test_template_failures_are_wrapped() -> None:
    provider = MemoryTemplateProvider(error=TemplateError("no template"))
    with pytest.raises(TemplateError, match="^failed to generate code: no template$"):
        _generator(provider=provider).generate()

    with pytest.raises(TemplateError, match="^failed to generate code: template is empty$"):
        _generator(provider=MemoryTemplateProvider("")).generate()


def test_format_failure_is_wrapped_and_keeps_lineno() -> None:
    writer = MemoryFileWriter()
    provider = MemoryTemplateProvider("X = (\n${countries}\n")

    with pytest.raises(FormatError, match="^failed to generate code: failed to format generated source") as exc:
        _generator(provider=provider, writer=writer).generate()
    assert exc.value.lineno is not None
    assert writer.files == {}


def test_write_failure_is_wrapped() -> None:
    writer = MemoryFileWriter(error=OutputWriteError("read-only", path="test_output.py"))

    with pytest.raises(OutputWriteError, match="^failed to write output: read-only$") as exc:
        _generator(writer=writer).generate()
    assert exc.value.path == "test_output.py"


def test_with_context_returns_copy() -> None:
    original = LoadError("boom")
    wrapped = original.with_context("outer")

    assert isinstance(wrapped, LoadError)
    assert isinstance(wrapped, GenerationError)
    assert str(wrapped) == "outer: boom"
    assert str(original) == "boom"
