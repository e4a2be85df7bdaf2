"""Exceptions raised by the svg-fixup file, config and CLI layers.

The fixup passes themselves never raise: input they cannot repair is
returned unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class SVGFixupError(Exception):
    """Base class for svg-fixup errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class SVGParseError(SVGFixupError):
    """Document is not well-formed XML."""


class ConfigError(SVGFixupError):
    """Configuration file is unreadable or invalid."""

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.path = path


class UnknownPassError(SVGFixupError):
    """A requested fixup pass does not exist."""

    def __init__(self, names: list[str]) -> None:
        super().__init__(
            f"Unknown fixup pass: {', '.join(names)}",
            details={"names": names},
        )
        self.names = names


class FixupIOError(SVGFixupError):
    """Input could not be read or output could not be written."""

    def __init__(self, path: Path | str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Cannot access {path}", details)
        self.path = path
