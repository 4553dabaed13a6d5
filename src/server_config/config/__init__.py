"""Server config schema and loader chain."""

from server_config.config.errors import ConfigError, ConfigParseError, ConfigSourceError, NoDataError
from server_config.config.interfaces import ConfigLoader, LoaderFn
from server_config.config.loader import LoaderChain, dump_config, from_local, load_config, parse_config
from server_config.config.models import Config, Handler, Middleware, Router, Server

__all__ = [
    "Config",
    "ConfigError",
    "ConfigLoader",
    "ConfigParseError",
    "ConfigSourceError",
    "Handler",
    "LoaderChain",
    "LoaderFn",
    "Middleware",
    "NoDataError",
    "Router",
    "Server",
    "dump_config",
    "from_local",
    "load_config",
    "parse_config",
]
