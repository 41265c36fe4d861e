from __future__ import annotations

from pathlib import Path

import pytest

import generate_countries
from conftest import FIXTURES_DIR
from generator.sources import EmbeddedDataLoader, FileDataLoader, FileTemplateProvider, PackageTemplateProvider


def _config(tmp_path: Path, *, output: Path) -> Path:
    p = tmp_path / "generate.yaml"
    p.write_text(
        f"""
generator:
  output_path: {output}
  repo_url: https://example.invalid/repo
  primary_source: {FIXTURES_DIR / "test_countries.json"}
  alternate_source: {FIXTURES_DIR / "test_currencies.json"}
""",
        encoding="utf-8",
    )
    return p


def test_generate_then_check(tmp_path: Path) -> None:
    out = tmp_path / "countries_data.py"
    cfg = _config(tmp_path, output=out)

    assert generate_countries.main(["--config", str(cfg)]) == 0
    code = out.read_text(encoding="utf-8")
    assert 'alpha2="CA",' in code
    assert 'capital="Ottawa",' in code
    assert "# Project: https://example.invalid/repo" in code

    assert generate_countries.main(["--config", str(cfg), "--check"]) == 0


def test_check_reports_stale_or_missing_output(tmp_path: Path) -> None:
    out = tmp_path / "countries_data.py"
    cfg = _config(tmp_path, output=out)

    assert generate_countries.main(["--config", str(cfg), "--check"]) == 1
    assert not out.exists()

    out.write_text("# stale\n", encoding="utf-8")
    assert generate_countries.main(["--config", str(cfg), "--check"]) == 1
    assert out.read_text(encoding="utf-8") == "# stale\n"


def test_cli_overrides_config(tmp_path: Path) -> None:
    cfg = _config(tmp_path, output=tmp_path / "ignored.py")
    out = tmp_path / "override.py"

    rc = generate_countries.main(["--config", str(cfg), "--output", str(out), "--repo-url", "https://other.invalid"])

    assert rc == 0
    assert out.exists()
    assert not (tmp_path / "ignored.py").exists()
    assert "# Project: https://other.invalid" in out.read_text(encoding="utf-8")


def test_generation_error_exits_1(tmp_path: Path) -> None:
    cfg = _config(tmp_path, output=tmp_path / "out.py")
    bad = tmp_path / "bad.json"
    bad.write_text("invalid json", encoding="utf-8")

    rc = generate_countries.main(
        ["--config", str(cfg), "--primary", str(bad), "--alternate", str(FIXTURES_DIR / "test_currencies.json")]
    )

    assert rc == 1
    assert not (tmp_path / "out.py").exists()


def test_invalid_config_exits_2(tmp_path: Path) -> None:
    cfg = tmp_path / "generate.yaml"
    cfg.write_text("generator: {}\n", encoding="utf-8")

    assert generate_countries.main(["--config", str(cfg)]) == 2
    assert generate_countries.main(["--config", str(tmp_path / "missing.yaml")]) == 2


def test_primary_without_alternate_is_usage_error() -> None:
    with pytest.raises(SystemExit) as exc:
        generate_countries.main(["--primary", "a.json"])
    assert exc.value.code == 2


def test_build_generator_picks_bundled_sources_by_default(tmp_path: Path) -> None:
    settings = generate_countries.load_generator_config(_config(tmp_path, output=tmp_path / "out.py"))
    settings = type(settings)(output_path=settings.output_path, repo_url=settings.repo_url)
    args = generate_countries._parse_args([])

    gen = generate_countries.build_generator(settings, args)

    assert isinstance(gen.data_loader, EmbeddedDataLoader)
    assert isinstance(gen.template_provider, PackageTemplateProvider)
    assert gen.output_path == str(tmp_path / "out.py")


def test_build_generator_uses_files_when_configured(tmp_path: Path) -> None:
    settings = generate_countries.load_generator_config(_config(tmp_path, output=tmp_path / "out.py"))
    tmpl = tmp_path / "custom.tmpl"
    args = generate_countries._parse_args(["--template", str(tmpl)])

    gen = generate_countries.build_generator(settings, args)

    assert isinstance(gen.data_loader, FileDataLoader)
    assert isinstance(gen.template_provider, FileTemplateProvider)


def test_check_with_directory_at_output_path_exits_1(tmp_path: Path) -> None:
    out = tmp_path / "countries_data.py"
    out.mkdir()

    assert generate_countries.main(["--config", str(_config(tmp_path, output=out)), "--check"]) == 1


def test_check_with_undecodable_output_exits_1(tmp_path: Path) -> None:
    out = tmp_path / "countries_data.py"
    out.write_bytes(b"\xff\xfe\xfd")

    assert generate_countries.main(["--config", str(_config(tmp_path, output=out)), "--check"]) == 1
    assert out.read_bytes() == b"\xff\xfe\xfd"
