from __future__ import annotations

from typing import Protocol


class DataLoader(Protocol):
    """Supplies the raw primary (ISO-3166) and alternate (country info) JSON documents."""

    def load_primary_data(self) -> bytes: ...

    def load_alternate_data(self) -> bytes: ...


class FileWriter(Protocol):
    def write(self, path: str, content: bytes) -> None: ...


class TemplateProvider(Protocol):
    def get_package_template(self) -> str: ...
