from __future__ import annotations

import copy


class GenerationError(Exception):
    def with_context(self, context: str) -> GenerationError:
        """Copy of this error (same type and attributes) with `context: ` prepended to the message."""
        err = copy.copy(self)
        err.args = (f"{context}: {self}",)
        return err


class LoadError(GenerationError):
    pass


class ParseError(GenerationError):
    pass


class TemplateError(GenerationError):
    pass


class FormatError(GenerationError):
    def __init__(self, message: str, *, lineno: int | None = None) -> None:
        super().__init__(message)
        self.lineno = lineno


class OutputWriteError(GenerationError):
    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
