"""Configuration loading and validation.

Settings reach DeepL Search in one of two ways:

- an INI file read by ``ConfigLoader`` (command line use), or
- key/value entries supplied by a search host, converted by ``ConfigLoader.from_entries``.

Both produce the same ``Config`` dataclass. Values are coerced to the type of the dataclass
default, and any problem is raised as a ``ConfigLoaderError`` subclass.
"""

from __future__ import annotations

import ast
import configparser
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

from models.config_models import HOST_ENTRIES, Config
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping

__all__: list[str] = [
    "Config",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
    "default_entries",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration contains a value of the wrong type."""


def default_entries() -> dict[str, str | bool]:
    """Host setting names with their default values."""
    defaults = Config()
    return {
        name: getattr(getattr(defaults, section), option) for name, (section, option) in HOST_ENTRIES.items()
    }


class ConfigLoader:
    """Loads and validates settings from an INI file.

    Args:
        config_filename (str): INI file name to load.
        script_name (str): Executing script name, used in error messages.
        **args: Command-line overrides: ``api_key`` (str), ``paid`` (bool), ``debug`` (bool).

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values or types.
    """

    def __init__(self, *, config_filename: str, script_name: str, **args) -> None:
        config_path = Path(config_filename)
        msg: str
        if not config_path.exists():
            msg = (
                f"Configuration file '{config_filename}' not found. "
                f"Please create '{config_filename}' in the same directory as '{script_name}'."
            )
            raise ConfigFileNotFoundError(msg)

        parser: ConfigParser = ConfigParser(interpolation=None)
        # option names are matched against upper-case dataclass fields
        parser.optionxform = str.upper  # type: ignore[assignment, method-assign]

        try:
            parser.read(config_path, encoding="utf-8")
        except configparser.Error as err:
            msg = f"Failed to parse configuration file '{config_filename}': {err}"
            raise ConfigFormatError(msg) from None

        self.config = Config()
        self._convert_settings(parser)

        if args.get("api_key"):
            self.config.DEEPL.API_KEY = args["api_key"]
        if args.get("paid", False):
            self.config.DEEPL.USE_FREE_TIER = False
        if args.get("debug", False):
            self.config.GENERAL.DEBUG = True
        validate_config(self.config)

    @classmethod
    def from_entries(cls, entries: Mapping[str, Any]) -> Config:
        """Build a ``Config`` from host-supplied settings.

        Unknown names are ignored. Boolean settings accept ``bool`` values or the usual INI spellings
        (``"true"``, ``"no"``, ``"1"`` ...).

        Raises:
            ConfigValueError: If a value cannot be converted.
            ConfigTypeError: If a value has an unsupported type.
        """
        config = Config()
        for name, value in entries.items():
            target: tuple[str, str] | None = HOST_ENTRIES.get(name)
            if target is None:
                logger.debug("Skipping unknown setting: '%s'", name)
                continue

            section_name, option = target
            section = getattr(config, section_name)
            setattr(section, option, _coerce(f"{section_name}.{option}", getattr(section, option), value))

        validate_config(config)
        return config

    def _convert_settings(self, parser: ConfigParser) -> None:
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue

            section_obj = getattr(self.config, section.name)
            for key in fields(section_obj):
                if not parser.has_option(section.name, key.name):
                    logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                    continue

                field_name: str = f"{section.name}.{key.name}"
                default: Any = getattr(section_obj, key.name)
                raw: str = parser.get(section.name, key.name)
                setattr(section_obj, key.name, _coerce(field_name, default, raw))


def _coerce(field_name: str, default: Any, value: Any) -> Any:
    """Convert ``value`` to the type of ``default``.

    Raises:
        ConfigValueError: If the value cannot be converted.
        ConfigTypeError: If the value has an unsupported type.
    """
    if isinstance(default, bool):
        return _parse_as_boolean(field_name, value)

    if isinstance(default, (int, float)):
        try:
            number: float = float(_unquote(value) if isinstance(value, str) else value)
        except (TypeError, ValueError) as err:
            msg = f"Invalid value for {field_name}: {value!r}"
            raise ConfigValueError(msg) from err
        return int(number) if isinstance(default, int) else number

    if isinstance(value, str):
        try:
            literal: Any = ast.literal_eval(value)
        except (ValueError, SyntaxError):
            # unquoted strings such as API keys
            return value.strip()
        # keys such as "12345" stay text
        return literal if isinstance(literal, str) else value.strip()

    msg = f"Unsupported type used for '{field_name}': {type(value)}"
    raise ConfigTypeError(msg)


def _parse_as_boolean(field_name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        state: bool | None = ConfigParser.BOOLEAN_STATES.get(_unquote(value).lower())
        if state is not None:
            return state
        msg = f"Invalid value for {field_name}: Not a boolean: {value}"
        raise ConfigValueError(msg)
    msg = f"Unsupported type used for '{field_name}': {type(value)}"
    raise ConfigTypeError(msg)


def _unquote(value: str) -> str:
    value = value.strip()
    for char in ("'", '"'):
        value = value.removeprefix(char).removesuffix(char)
    return value


def validate_config(config: Config) -> None:
    """Check cross-field constraints.

    Raises:
        ConfigValueError: If a value is out of range.
    """
    if config.DEEPL.TIMEOUT < 0:
        msg = f"'DEEPL.TIMEOUT' must not be negative: {config.DEEPL.TIMEOUT}"
        raise ConfigValueError(msg)
    if not config.DEEPL.API_KEY:
        logger.debug("No DeepL API key configured.")


if __name__ == "__main__":
    import pprint

    test = ConfigLoader(config_filename="deepl_search.ini", script_name="TEST")
    pprint.PrettyPrinter(indent=1, width=100).pprint(test.config)
