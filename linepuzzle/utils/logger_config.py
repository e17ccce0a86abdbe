import logging.config

from linepuzzle.config import get_active_params


def configure_logging(level=None):
    if level is None:
        level = get_active_params()["LOG_LEVEL"]

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,

        # Formatters: How the logs look
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
        },

        # Handlers: Where the logs go
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            },
        },

        # Loggers: The configuration for specific modules
        "loggers": {
            "linepuzzle": {
                "handlers": ["console"],
                "level": level,
                "propagate": False
            },
        }
    }

    logging.config.dictConfig(logging_config)
