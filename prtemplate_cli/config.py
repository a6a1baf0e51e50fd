from __future__ import annotations

import configparser
from pathlib import Path

from prtemplate_cli.exceptions import ConfigError
from prtemplate_cli.models.config import AppConfig

CONFIG_FILENAME = ".prtemplate-cli.ini"
_SECTION = "prtemplate"
_REQUIRED_KEYS = ("template",)


def config_exists(directory: Path) -> bool:
    return (directory / CONFIG_FILENAME).is_file()


def write_config(directory: Path, config: AppConfig) -> None:
    cp = configparser.ConfigParser()
    cp[_SECTION] = {
        "template": config.template,
        "format": config.format,
        "strict": "yes" if config.strict else "no",
    }
    path = directory / CONFIG_FILENAME
    with open(path, "w", encoding="utf-8") as f:
        cp.write(f)


def read_config(directory: Path) -> AppConfig:
    path = directory / CONFIG_FILENAME
    if not path.is_file():
        raise ConfigError(
            "Configuration not found. Run prtemplate-cli --init first."
        )

    cp = configparser.ConfigParser()
    try:
        cp.read(str(path), encoding="utf-8")
    except configparser.Error as exc:
        raise ConfigError(
            f"Invalid configuration format in {CONFIG_FILENAME}. "
            "Run prtemplate-cli --init to reconfigure."
        ) from exc

    if not cp.has_section(_SECTION):
        raise ConfigError(
            f"Invalid configuration: missing [{_SECTION}] section in {CONFIG_FILENAME}."
        )

    for key in _REQUIRED_KEYS:
        if not cp.has_option(_SECTION, key) or not cp.get(_SECTION, key).strip():
            raise ConfigError(
                f"Invalid configuration: missing or empty '{key}' in {CONFIG_FILENAME}. "
                "Run prtemplate-cli --init to reconfigure."
            )

    try:
        strict = cp.getboolean(_SECTION, "strict", fallback=False)
    except ValueError as exc:
        raise ConfigError(
            f"Invalid configuration: 'strict' must be yes or no in {CONFIG_FILENAME}."
        ) from exc

    return AppConfig(
        template=cp.get(_SECTION, "template"),
        format=cp.get(_SECTION, "format", fallback="text"),
        strict=strict,
    )
