from __future__ import annotations

from pathlib import Path

import pytest

from utils.config import load_generator_config


PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _write(tmp_path: Path, body: str) -> Path:
    p = tmp_path / "generate.yaml"
    p.write_text(body, encoding="utf-8")
    return p


def test_project_default_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COUNTRIES_GENERATE_CONFIG", raising=False)

    settings = load_generator_config()

    assert settings.output_path == PROJECT_ROOT / "src" / "countries" / "countries_data.py"
    assert settings.repo_url.startswith("https://")
    assert settings.primary_source is None
    assert settings.alternate_source is None
    assert settings.template_path is None
    assert settings.atomic_write is True


def test_explicit_path_and_relative_resolution(tmp_path: Path) -> None:
    cfg = _write(
        tmp_path,
        """
generator:
  output_path: build/countries_data.py
  repo_url: https://example.invalid/repo
  primary_source: data/iso.json
  alternate_source: /abs/info.json
  template_path: custom.tmpl
  atomic_write: false
""",
    )

    settings = load_generator_config(cfg)

    assert settings.output_path == PROJECT_ROOT / "build" / "countries_data.py"
    assert settings.repo_url == "https://example.invalid/repo"
    assert settings.primary_source == PROJECT_ROOT / "data" / "iso.json"
    assert settings.alternate_source == Path("/abs/info.json")
    assert settings.template_path == PROJECT_ROOT / "custom.tmpl"
    assert settings.atomic_write is False


def test_env_var_is_used_when_no_explicit_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = _write(
        tmp_path,
        """
generator:
  output_path: /tmp/out.py
  repo_url: https://env.invalid/repo
""",
    )
    monkeypatch.setenv("COUNTRIES_GENERATE_CONFIG", str(cfg))

    settings = load_generator_config()

    assert settings.output_path == Path("/tmp/out.py")
    assert settings.repo_url == "https://env.invalid/repo"


def test_missing_required_keys(tmp_path: Path) -> None:
    cfg = _write(tmp_path, "generator:\n  primary_source: ''\n")

    with pytest.raises(ValueError, match="generator.output_path, generator.repo_url"):
        load_generator_config(cfg)


def test_empty_file_is_missing_everything(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Missing generator.output_path"):
        load_generator_config(_write(tmp_path, ""))


def test_sources_must_be_set_together(tmp_path: Path) -> None:
    cfg = _write(
        tmp_path,
        """
generator:
  output_path: out.py
  repo_url: https://example.invalid/repo
  primary_source: iso.json
""",
    )

    with pytest.raises(ValueError, match="must be set together"):
        load_generator_config(cfg)


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_generator_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize("value", ['"false"', "'true'", "0", "no-thanks"])
def test_atomic_write_must_be_a_yaml_bool(tmp_path: Path, value: str) -> None:
    cfg = _write(
        tmp_path,
        f"""
generator:
  output_path: out.py
  repo_url: https://example.invalid/repo
  atomic_write: {value}
""",
    )

    with pytest.raises(ValueError, match="generator.atomic_write must be true or false"):
        load_generator_config(cfg)
