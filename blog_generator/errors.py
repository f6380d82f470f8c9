"""Exceptions raised by the blog generation pipeline.

Every failure is terminal for a run; the CLI catches BlogGenerationError,
prints it and exits without writing a page.
"""

from __future__ import annotations


class BlogGenerationError(Exception):
    """Base class for all pipeline failures."""


class ConfigError(BlogGenerationError, ValueError):
    """A required setting (usually an API key) is missing."""


class UpstreamError(BlogGenerationError, RuntimeError):
    """A remote API failed or returned nothing usable."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ContentParseError(BlogGenerationError, ValueError):
    """The completion text was not valid JSON after fence stripping."""

    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        self.raw_text = raw_text
