from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

from generator.generator import CountryDataGenerator, GeneratorConfig
from generator.sources import EmbeddedDataLoader, OSFileWriter, PackageTemplateProvider
from utils.config import load_generator_config


COMMITTED = Path(__file__).resolve().parents[2] / "src" / "countries" / "countries_data.py"


def _generate(output: Path) -> CountryDataGenerator:
    settings = load_generator_config()
    gen = CountryDataGenerator(
        GeneratorConfig(
            data_loader=EmbeddedDataLoader(),
            file_writer=OSFileWriter(),
            template_provider=PackageTemplateProvider(),
            output_path=output,
            repo_url=settings.repo_url,
        )
    )
    gen.generate()
    return gen


@pytest.mark.integration
def test_bundled_sources_generate_importable_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COUNTRIES_GENERATE_CONFIG", raising=False)
    out = tmp_path / "countries_data.py"
    _generate(out)

    spec = importlib.util.spec_from_file_location("generated_countries_data", out)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    assert len(module.COUNTRIES) == 249
    assert len(module.BY_ALPHA2) == 249
    assert len(module.BY_CAPITAL) >= 240
    us = module.COUNTRIES[module.BY_ALPHA2["US"]]
    assert us.capital == "Washington"
    assert us.currency_code == "USD"
    assert module.COUNTRIES[module.BY_CAPITAL["kingston"]].alpha2 == "JM"


@pytest.mark.integration
def test_regeneration_is_byte_identical(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COUNTRIES_GENERATE_CONFIG", raising=False)
    first = tmp_path / "a" / "countries_data.py"
    second = tmp_path / "b" / "countries_data.py"

    _generate(first)
    _generate(second)

    assert first.read_bytes() == second.read_bytes()


@pytest.mark.integration
def test_committed_module_is_up_to_date(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COUNTRIES_GENERATE_CONFIG", raising=False)
    out = tmp_path / "countries_data.py"
    _generate(out)

    assert out.read_bytes() == COMMITTED.read_bytes(), "run scripts/generate_countries.py"
