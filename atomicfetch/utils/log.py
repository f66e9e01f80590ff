"""Console logging setup for the command line entry point."""

from __future__ import annotations

import logging
import logging.config


def configure_logging(level: str = "INFO") -> None:
    """Send ``atomicfetch`` log records to stderr at ``level``."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s  %(levelname)-7s  %(message)s",
                    "datefmt": "%H:%M:%S",
                },
                "debug": {
                    "format": "%(asctime)s  %(levelname)-7s  [%(name)s:%(lineno)d]  %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "level": level,
                    "formatter": "debug" if level == "DEBUG" else "console",
                },
            },
            "loggers": {
                "atomicfetch": {
                    "level": level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }
    )
