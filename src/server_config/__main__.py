from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from server_config.config import Config, ConfigError, ConfigLoader, LoaderChain, dump_config
from server_config.logging import LogFileSettings, LoggingSettings, init_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="server-config", description="Server config loader")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file, rotated daily",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    # Command: check
    check_parser = subparsers.add_parser("check", help="Load a config and print a summary")
    check_parser.add_argument("location", help="Config location, e.g. ./config.yaml")

    # Command: dump
    dump_parser = subparsers.add_parser("dump", help="Load a config and print it as normalized YAML")
    dump_parser.add_argument("location", help="Config location, e.g. ./config.yaml")

    return parser


def _logging_settings(args: argparse.Namespace) -> LoggingSettings:
    file_settings = LogFileSettings(path=args.log_file) if args.log_file else None
    return LoggingSettings(level=args.log_level, file=file_settings)


def _summarize(config: Config) -> list[str]:
    lines = [f"port: {config.server.port}"]
    for router in config.server.routers:
        lines.append(
            f"router {router.prefix}: middlewares={len(router.middlewares)} handlers={len(router.handlers)}"
        )
    return lines


def _load_config(args: argparse.Namespace) -> Config:
    loader: ConfigLoader = LoaderChain()
    return loader.load(args.location)


def _check(args: argparse.Namespace) -> None:
    config = _load_config(args)
    for line in _summarize(config):
        print(line)


def _dump(args: argparse.Namespace) -> None:
    config = _load_config(args)
    sys.stdout.write(dump_config(config))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        init_logging(_logging_settings(args))
    except ValueError as e:
        parser.error(str(e))

    try:
        if args.command == "check":
            _check(args)
        elif args.command == "dump":
            _dump(args)
    except ConfigError as e:
        logger.debug("Config load failed. location=%s", args.location, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
