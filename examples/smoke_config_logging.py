from __future__ import annotations

import logging

from server_config import load_config
from server_config.logging import LoggingSettings, init_logging


def main() -> None:
    init_logging(LoggingSettings(level="DEBUG"))

    config = load_config("./examples/config.yaml")

    logger = logging.getLogger("smoke")
    logger.info("Config loaded port=%s", config.server.port)
    for router in config.server.routers:
        logger.info(
            "Router prefix=%s middlewares=%s handlers=%s",
            router.prefix,
            [m.type for m in router.middlewares],
            [h.path for h in router.handlers],
        )


if __name__ == "__main__":
    main()
