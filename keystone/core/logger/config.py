"""
Logging configuration for the Keystone application.

Configurations are JSON `dictConfig` documents, one per mode (production,
development, testing). `${KEY}` placeholders in a document are replaced before
it is parsed, which is how the log level and data directory are injected.
"""
import json
import logging
import pathlib
import typing
from logging import config as logging_config

__dir = pathlib.Path(__file__).parent
__conf: dict[str, typing.Any] | None = None

MODE_CONFIGS = {
    "production": "logconf.prod.json",
    "development": "logconf.dev.json",
    "testing": "logconf.test.json",
}

LOGGER_NAME = "keystone"


def _log_config(path: pathlib.Path, substitutions: dict[str, str] | None = None) -> dict[str, typing.Any]:
    """
    Reads a logging configuration from a JSON file, applying `substitutions` first.

    Args:
        path (pathlib.Path): The JSON configuration file.
        substitutions (dict[str, str] | None, optional): Placeholder values keyed
            by placeholder name (without `${}`). Defaults to None.
    """
    contents = path.read_text()
    for key, value in (substitutions or {}).items():
        contents = contents.replace(f"${{{key}}}", value)

    return json.loads(contents)


def log_config() -> dict[str, typing.Any]:
    """
    Returns the active logging configuration.

    Raises:
        ValueError: If `configured_logger` has not been called yet.
    """
    if __conf is None:
        raise ValueError("Logger not configured, must call configured_logger first")
    return __conf


def configured_logger(
    *,
    mode: str,
    config_override: pathlib.Path | None = None,
    substitutions: dict[str, str] | None = None,
) -> logging.Logger:
    """
    Applies the logging configuration for `mode` and returns the package logger.

    Args:
        mode (str): One of "production", "development" or "testing".
        config_override (pathlib.Path | None, optional): Custom configuration used
            instead of the bundled one for `mode`. Defaults to None.
        substitutions (dict[str, str] | None, optional): Placeholder values applied
            to the configuration file.

    Raises:
        ValueError: If `mode` is unknown and no override is given.
    """
    global __conf

    if config_override:
        path = config_override
    elif mode in MODE_CONFIGS:
        path = __dir / MODE_CONFIGS[mode]
    else:
        raise ValueError(f"Invalid mode: {mode}")

    __conf = _log_config(path, substitutions)
    logging_config.dictConfig(config=__conf)
    return logging.getLogger(LOGGER_NAME)
