# qif_codec/utilities/config_logging.py
from __future__ import annotations

import copy
import logging
import logging.config
from typing import Any

LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "simple",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "qif_codec": {
            "level": "DEBUG",
            "handlers": ["console"],
            "propagate": False,
        },
    },
}


def configure_logging(level: int | str = logging.WARNING, verbose: bool = False) -> None:
    """
    Apply ``LOGGING`` with the console handler at ``level``.

    Library code never calls this; only entry points such as the CLI do.
    """
    config = copy.deepcopy(LOGGING)
    console = config["handlers"]["console"]
    console["level"] = logging.getLevelName(level) if isinstance(level, int) else level
    if verbose:
        console["formatter"] = "verbose"
    logging.config.dictConfig(config)
