import logging
from logging.config import dictConfig
import sys
from .config import settings

LOG_LEVEL = "DEBUG" if settings.DEBUG else "INFO"

# Define log configuration
log_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": LOG_LEVEL,
            "formatter": "default",
            "stream": sys.stdout,
        },
    },
    "loggers": {
        # Output goes through the root console handler
        "app": {
            "level": LOG_LEVEL,
            "propagate": True
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
}

# Configure logging
dictConfig(log_config)

# Create logger instance
logger = logging.getLogger("app")
