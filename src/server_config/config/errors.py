from __future__ import annotations

from typing import Optional, Sequence


class ConfigError(Exception):
    """Base for configuration loading failures."""

    def __init__(self, message: str, *, location: Optional[str] = None) -> None:
        super().__init__(message)
        self.location = location


class ConfigSourceError(ConfigError):
    """A loader could not read its source. The loader chain moves on to the next loader."""


class NoDataError(ConfigError):
    """Every loader declined the location or failed to read it."""

    def __init__(
        self,
        message: str,
        *,
        location: Optional[str] = None,
        failures: Sequence[BaseException] = (),
    ) -> None:
        super().__init__(message, location=location)
        self.failures = list(failures)


class ConfigParseError(ConfigError):
    """The selected data is not a valid config document."""
