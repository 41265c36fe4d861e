from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from generator.errors import LoadError, OutputWriteError, TemplateError


PRIMARY_RESOURCE = "iso3166.json"
ALTERNATE_RESOURCE = "country_info.json"
TEMPLATE_RESOURCE = "countries_data.py.tmpl"


def _package_dir() -> Path:
    # Resolve from this file: .../src/generator/sources.py -> src/generator
    return Path(__file__).resolve().parent


def _read_resource(subdir: str, name: str) -> bytes:
    return (_package_dir() / subdir / name).read_bytes()


def _new_file_mode(target: Path) -> int:
    # Match what a plain open() would give: keep an existing file's mode, else 0666 minus umask.
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class EmbeddedDataLoader:
    """Reads the JSON sources bundled in generator/data/."""

    def load_primary_data(self) -> bytes:
        try:
            return _read_resource("data", PRIMARY_RESOURCE)
        except OSError as e:
            raise LoadError(f"failed to load ISO3166 data: {e}") from e

    def load_alternate_data(self) -> bytes:
        try:
            return _read_resource("data", ALTERNATE_RESOURCE)
        except OSError as e:
            raise LoadError(f"failed to load currency data: {e}") from e


class FileDataLoader:
    def __init__(self, primary_path: str | Path, alternate_path: str | Path) -> None:
        self.primary_path = Path(primary_path)
        self.alternate_path = Path(alternate_path)

    def load_primary_data(self) -> bytes:
        try:
            return self.primary_path.read_bytes()
        except OSError as e:
            raise LoadError(f"failed to load ISO3166 data from {self.primary_path}: {e}") from e

    def load_alternate_data(self) -> bytes:
        try:
            return self.alternate_path.read_bytes()
        except OSError as e:
            raise LoadError(f"failed to load currency data from {self.alternate_path}: {e}") from e


class PackageTemplateProvider:
    """Template bundled in generator/templates/."""

    def get_package_template(self) -> str:
        try:
            return _read_resource("templates", TEMPLATE_RESOURCE).decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateError(f"failed to read bundled template: {e}") from e


class FileTemplateProvider:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get_package_template(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateError(f"failed to read template {self.path}: {e}") from e


class OSFileWriter:
    """
    Writes the generated module to disk.

    - atomic=True (default): write a temp file in the target directory, then os.replace().
      A failed run leaves the previous file untouched.
    - atomic=False: create/truncate the target and write in place.
    """

    def __init__(self, *, atomic: bool = True) -> None:
        self.atomic = bool(atomic)

    def write(self, path: str, content: bytes) -> None:
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            if not self.atomic:
                target.write_bytes(content)
                return
            self._write_atomic(target, content)
        except OSError as e:
            raise OutputWriteError(f"failed to write {target}: {e}", path=str(target)) from e

    def _write_atomic(self, target: Path, content: bytes) -> None:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent))
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(content)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp_name, _new_file_mode(target))
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
