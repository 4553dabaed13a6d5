from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import yaml
from pydantic import ValidationError

from server_config.config.errors import ConfigParseError, ConfigSourceError, NoDataError
from server_config.config.interfaces import LoaderFn
from server_config.config.models import Config

LOCAL_PREFIX = "./"

_TEXT_TAGS = ("tag:yaml.org,2002:null", "tag:yaml.org,2002:merge")


class _TextLoader(yaml.SafeLoader):
    """
    Safe loader that leaves plain scalars as the text they were written with.

    Only null and merge keys are resolved implicitly; `0x1F90`, `0755`, `yes` and
    `1.0e+3` all stay strings.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag in _TEXT_TAGS]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


def from_local(location: str) -> Optional[bytes]:
    """Read a `./`-relative location from the current working directory."""
    if not location.startswith(LOCAL_PREFIX):
        return None

    # Appended rather than joined so an absolute remainder still lands under the cwd.
    path = Path(str(Path.cwd()) + location[len(LOCAL_PREFIX) - 1 :])
    try:
        return path.read_bytes()
    except OSError as e:
        raise ConfigSourceError(f"Failed to read local config file: {path}", location=location) from e


def _read_yaml_document(data: Union[bytes, str], location: Optional[str]) -> dict[str, Any]:
    try:
        document = yaml.load(data, Loader=_TextLoader)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML: {e}", location=location) from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigParseError(
            f"Top-level YAML must be a mapping, got: {type(document).__name__}", location=location
        )
    return document


def parse_config(data: Union[bytes, str], *, location: Optional[str] = None) -> Config:
    """Deserialize a YAML document into a new Config."""
    document = _read_yaml_document(data, location)
    try:
        return Config.model_validate(document)
    except ValidationError as e:
        raise ConfigParseError(f"Config does not match the server schema: {e}", location=location) from e


def dump_config(config: Config) -> str:
    return yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False, allow_unicode=True)


class LoaderChain:
    """
    Tries loader functions in order and parses the first data returned.

    Declined and failed loaders both fall through to the next one. Failures are logged
    and kept for the NoDataError raised when the chain runs out.
    """

    def __init__(self, loaders: Sequence[LoaderFn] = (), *, logger: Optional[logging.Logger] = None) -> None:
        self._loaders: tuple[LoaderFn, ...] = tuple(loaders) or (from_local,)
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    @property
    def loaders(self) -> tuple[LoaderFn, ...]:
        return self._loaders

    def fetch(self, location: str) -> bytes:
        failures: list[BaseException] = []
        for loader in self._loaders:
            name = getattr(loader, "__name__", type(loader).__name__)
            try:
                data = loader(location)
            except (ConfigSourceError, OSError) as exc:
                self._logger.warning(
                    "Config loader failed, trying next. loader=%s location=%s error=%s",
                    name,
                    location,
                    exc,
                )
                failures.append(exc)
                continue

            if data is None:
                self._logger.debug("Config loader declined. loader=%s location=%s", name, location)
                continue

            if not data:
                self._logger.warning(
                    "Config loader returned an empty document. loader=%s location=%s", name, location
                )
            self._logger.debug("Config data selected. loader=%s location=%s bytes=%s", name, location, len(data))
            return data

        error = NoDataError(
            f"No config loader produced data for location: {location}",
            location=location,
            failures=failures,
        )
        if failures:
            raise error from failures[-1]
        raise error

    def load(self, location: str) -> Config:
        data = self.fetch(location)
        config = parse_config(data, location=location)
        self._logger.info(
            "Config loaded. location=%s port=%s routers=%s",
            location,
            config.server.port,
            len(config.server.routers),
        )
        return config


def load_config(location: str, *loaders: LoaderFn, logger: Optional[logging.Logger] = None) -> Config:
    """
    Load a Config for `location` using the given loaders, in order.

    With no loaders, only `from_local` is tried.
    """
    return LoaderChain(loaders, logger=logger).load(location)
