from __future__ import annotations

import json
import os
import stat
from pathlib import Path

import pytest

from conftest import FIXTURES_DIR
from generator import sources
from generator.errors import LoadError, OutputWriteError, TemplateError
from generator.sources import (
    EmbeddedDataLoader,
    FileDataLoader,
    FileTemplateProvider,
    OSFileWriter,
    PackageTemplateProvider,
)


def test_embedded_loader_returns_bundled_sources() -> None:
    loader = EmbeddedDataLoader()

    primary = json.loads(loader.load_primary_data())
    alternate = json.loads(loader.load_alternate_data())

    assert len(primary) == 249
    assert primary[0]["alpha-2"] == "AF"
    assert any(r["countryCode"] == "US" for r in alternate)


def test_file_loader_reads_both_sources() -> None:
    loader = FileDataLoader(FIXTURES_DIR / "test_countries.json", FIXTURES_DIR / "test_currencies.json")

    assert b'"alpha-2": "CA"' in loader.load_primary_data()
    assert b'"countryCode": "XK"' in loader.load_alternate_data()


def test_file_loader_missing_file_raises_load_error(tmp_path: Path) -> None:
    loader = FileDataLoader(tmp_path / "missing.json", tmp_path / "also-missing.json")

    with pytest.raises(LoadError, match="failed to load ISO3166 data"):
        loader.load_primary_data()
    with pytest.raises(LoadError, match="failed to load currency data"):
        loader.load_alternate_data()


def test_package_template_has_every_placeholder() -> None:
    template = PackageTemplateProvider().get_package_template()

    for name in (
        "repo_url",
        "alpha2_constants",
        "alpha3_constants",
        "countries",
        "by_name",
        "by_alpha2",
        "by_alpha3",
        "by_country_code",
        "by_iso31662",
        "by_capital",
    ):
        assert "${" + name + "}" in template


def test_file_template_provider(tmp_path: Path) -> None:
    p = tmp_path / "custom.tmpl"
    p.write_text("X = 1\n", encoding="utf-8")

    assert FileTemplateProvider(p).get_package_template() == "X = 1\n"

    with pytest.raises(TemplateError, match="failed to read template"):
        FileTemplateProvider(tmp_path / "missing.tmpl").get_package_template()


def test_file_template_provider_rejects_non_utf8(tmp_path: Path) -> None:
    p = tmp_path / "latin1.tmpl"
    p.write_bytes(b"\xff\xfe\xfd")

    with pytest.raises(TemplateError):
        FileTemplateProvider(p).get_package_template()


@pytest.mark.parametrize("atomic", [True, False])
def test_writer_creates_parents_and_writes(tmp_path: Path, atomic: bool) -> None:
    target = tmp_path / "nested" / "dir" / "out.py"

    OSFileWriter(atomic=atomic).write(str(target), b"x = 1\n")

    assert target.read_bytes() == b"x = 1\n"


@pytest.mark.parametrize("atomic", [True, False])
def test_writer_replaces_existing_file(tmp_path: Path, atomic: bool) -> None:
    target = tmp_path / "out.py"
    target.write_bytes(b"old content that is longer\n")

    OSFileWriter(atomic=atomic).write(str(target), b"new\n")

    assert target.read_bytes() == b"new\n"


def test_atomic_writer_leaves_no_temp_files(tmp_path: Path) -> None:
    target = tmp_path / "out.py"
    OSFileWriter().write(str(target), b"x = 1\n")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["out.py"]


def test_atomic_writer_keeps_previous_file_on_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "out.py"
    target.write_bytes(b"previous\n")

    def _fail(src, dst):
        raise OSError("replace failed")

    monkeypatch.setattr(os, "replace", _fail)

    with pytest.raises(OutputWriteError, match="replace failed") as exc:
        OSFileWriter().write(str(target), b"new\n")

    assert exc.value.path == str(target)
    assert target.read_bytes() == b"previous\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["out.py"]


def test_writer_error_when_parent_is_a_file(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(OutputWriteError):
        OSFileWriter(atomic=False).write(str(blocker / "out.py"), b"x = 1\n")


def test_embedded_loader_reads_files_beside_the_module() -> None:
    data_dir = Path(sources.__file__).resolve().parent / "data"

    assert EmbeddedDataLoader().load_primary_data() == (data_dir / "iso3166.json").read_bytes()
    assert EmbeddedDataLoader().load_alternate_data() == (data_dir / "country_info.json").read_bytes()


def test_embedded_loader_missing_resource_raises_load_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sources, "_package_dir", lambda: tmp_path)

    with pytest.raises(LoadError, match="failed to load ISO3166 data"):
        EmbeddedDataLoader().load_primary_data()
    with pytest.raises(TemplateError, match="failed to read bundled template"):
        PackageTemplateProvider().get_package_template()


def test_atomic_and_in_place_writes_get_the_same_mode(tmp_path: Path) -> None:
    atomic_target = tmp_path / "atomic.py"
    plain_target = tmp_path / "plain.py"

    OSFileWriter(atomic=True).write(str(atomic_target), b"x = 1\n")
    OSFileWriter(atomic=False).write(str(plain_target), b"x = 1\n")

    assert stat.S_IMODE(atomic_target.stat().st_mode) == stat.S_IMODE(plain_target.stat().st_mode)


def test_new_file_mode_follows_umask(tmp_path: Path) -> None:
    old = os.umask(0o027)
    try:
        target = tmp_path / "out.py"
        OSFileWriter().write(str(target), b"x = 1\n")
    finally:
        os.umask(old)

    assert stat.S_IMODE(target.stat().st_mode) == 0o640


def test_atomic_write_keeps_existing_mode(tmp_path: Path) -> None:
    target = tmp_path / "out.py"
    target.write_bytes(b"old\n")
    target.chmod(0o604)

    OSFileWriter().write(str(target), b"new\n")

    assert target.read_bytes() == b"new\n"
    assert stat.S_IMODE(target.stat().st_mode) == 0o604
