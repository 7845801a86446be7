"""Logging setup for the web front end"""

import logging
import logging.config
from os import environ

from yaml import safe_load

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_FORMAT = "%(asctime)s   %(name)-35s %(levelname)-8s %(message)s"


def _load_dict_config(path: str) -> None:
    with open(path, "r") as f:
        logging.config.dictConfig(safe_load(f.read()))


def configure_logging(level: str | None = None) -> None:
    """Configure logging from environment variables.

    LOG_CONFIG points to a YAML dictConfig file and takes precedence over
    LOG_LEVEL, LOG_FORMAT and LOG_FILE.
    """
    log_config_path = environ.get("LOG_CONFIG")
    if log_config_path:
        _load_dict_config(log_config_path)
        return

    log_level = (level or environ.get("LOG_LEVEL", "INFO")).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {log_level}")
    log_file = environ.get("LOG_FILE")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        handlers=handlers,
    )
    # every API call is already logged by the contacts client
    logging.getLogger("urllib3").setLevel(logging.WARNING)
