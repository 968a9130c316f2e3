"""
Dialog errors.

All failures raised by the tree core, builders and serializer derive from
DialogError so callers can catch them in one place.
"""

from __future__ import annotations

from pathlib import Path


class DialogError(Exception):
    """Base class for dialogtree errors."""


class ValidationError(DialogError):
    """A branch or dialog was finalized without required content."""


class UnsupportedFormatError(DialogError):
    """Save/load was given a path whose extension is not a known format."""

    def __init__(self, path: str | Path, supported: tuple[str, ...] = ()):
        self.path = Path(path)
        self.suffix = self.path.suffix
        self.supported = supported
        message = f"Unknown file format: '{self.suffix or self.path.name}'"
        if supported:
            message += f" (expected one of {', '.join(supported)})"
        super().__init__(message)


class MalformedDataError(DialogError):
    """
    Stored text does not match the dialog file structure, or a dialog
    cannot be written in the configured file encoding.
    """

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)
