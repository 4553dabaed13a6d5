"""Declarative server configuration: ports, routers, middlewares and handlers loaded from YAML."""

from server_config.config import (
    Config,
    ConfigError,
    ConfigLoader,
    ConfigParseError,
    ConfigSourceError,
    Handler,
    LoaderChain,
    LoaderFn,
    Middleware,
    NoDataError,
    Router,
    Server,
    dump_config,
    from_local,
    load_config,
    parse_config,
)

__version__ = "0.1.0"

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
