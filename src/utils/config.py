from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import os
import yaml


@dataclass(frozen=True)
class GeneratorSettings:
    output_path: Path
    repo_url: str
    # None -> use the sources / template bundled with the generator package.
    primary_source: Path | None = None
    alternate_source: Path | None = None
    template_path: Path | None = None
    atomic_write: bool = True


def _project_root() -> Path:
    # Resolve from this file: .../src/utils/config.py -> project root is 3 parents up.
    return Path(__file__).resolve().parents[2]


def _resolve_path(value: Any, *, base: Path) -> Path | None:
    if value is None or str(value).strip() == "":
        return None
    p = Path(str(value))
    return p if p.is_absolute() else base / p


def load_generator_config(path: str | Path | None = None) -> GeneratorSettings:
    """
    Load generator config from YAML.

    Precedence:
    - explicit `path`
    - env `COUNTRIES_GENERATE_CONFIG`
    - project default `config/generate.yaml`

    Relative paths inside the file resolve against the project root.
    """
    root = _project_root()
    cfg_path = Path(path or os.getenv("COUNTRIES_GENERATE_CONFIG") or (root / "config" / "generate.yaml"))
    cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    gen = cfg.get("generator") or {}

    output_path = gen.get("output_path")
    repo_url = gen.get("repo_url")

    missing: list[str] = []
    if not output_path:
        missing.append("generator.output_path")
    if not repo_url:
        missing.append("generator.repo_url")
    if missing:
        raise ValueError(f"Missing {', '.join(missing)} in {cfg_path}")

    primary = _resolve_path(gen.get("primary_source"), base=root)
    alternate = _resolve_path(gen.get("alternate_source"), base=root)
    if (primary is None) != (alternate is None):
        raise ValueError(f"generator.primary_source and generator.alternate_source must be set together in {cfg_path}")

    out = Path(str(output_path))
    if not out.is_absolute():
        out = root / out
    atomic = gen.get("atomic_write")
    if atomic is None:
        atomic = True
    elif not isinstance(atomic, bool):
        raise ValueError(f"generator.atomic_write must be true or false in {cfg_path}, got {atomic!r}")

    return GeneratorSettings(
        output_path=out,
        repo_url=str(repo_url),
        primary_source=primary,
        alternate_source=alternate,
        template_path=_resolve_path(gen.get("template_path"), base=root),
        atomic_write=atomic,
    )
