from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from server_config.config.models import Config


class LoaderFn(Protocol):
    """
    Fetches raw config bytes for a location.

    Return None when the location is not meant for this loader. Raise ConfigSourceError
    (or let an OSError escape) when the location applies but cannot be read. Both cases
    hand the location to the next loader in the chain.
    """

    def __call__(self, location: str) -> Optional[bytes]:
        ...


@runtime_checkable
class ConfigLoader(Protocol):
    def load(self, location: str) -> Config:
        ...
