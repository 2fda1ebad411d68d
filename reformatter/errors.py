from __future__ import annotations

from typing import Optional


class ReformatError(Exception):
    """Base class for everything the reformatter raises on purpose."""


class ConfigurationError(ReformatError, ValueError):
    """Columns, header, template or sort field are missing or invalid."""


class MalformedInputError(ReformatError, ValueError):
    """An input line does not split into one field per configured column."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        expected: Optional[int] = None,
        found: Optional[int] = None,
    ):
        super().__init__(message)
        self.line = line
        self.expected = expected
        self.found = found


class TemplateDataError(ReformatError, TypeError):
    """A row value handed to a template is not a string."""
