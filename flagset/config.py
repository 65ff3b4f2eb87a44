# Flagset CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loader for flag declarations stored in YAML or TOML files."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from flagset.exceptions import FlagDefinitionError
from flagset.logger import logger
from flagset.parser import FlagParser, ValueKind
from flagset.parser.parser_types import MISSING


class RawFlag(BaseModel):
    """Raw flag model for Flagset configuration."""

    name: str
    type: str = "str"
    short: str | None = None
    help: str = ""
    required: bool = False
    default: str | bool | int | float | None = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        return ValueKind(value).value

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("short must be a single character.")
        return value


class FlagsetConfig(BaseModel):
    """Flagset configuration model."""

    description: str = ""
    flags: list[RawFlag] = Field(default_factory=list)

    def to_parser(self) -> FlagParser:
        parser = FlagParser(self.description)
        for raw_flag in self.flags:
            parser.add_flag(
                raw_flag.name,
                kind=raw_flag.type,
                short=raw_flag.short,
                help=raw_flag.help,
                required=raw_flag.required,
                default=MISSING if raw_flag.default is None else raw_flag.default,
            )
        return parser


def load_raw_config(path: Path) -> Any:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(config_file)
        elif suffix == ".toml":
            return toml.load(config_file)
    raise FlagDefinitionError(f"Unsupported config format: {suffix}")


def loader(file_path: Path | str) -> FlagParser:
    """
    Load flag declarations from a YAML or TOML file.

    The file should contain a mapping with an optional `description` and a list of
    `flags`. Each flag is a mapping with at least a `name`, and optionally `type`,
    `short`, `help`, `required` and `default`.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        FlagParser: A parser with the declared flags registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        FlagDefinitionError: If the file format is unsupported or the content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = load_raw_config(path)
    if not isinstance(raw_config, dict):
        raise FlagDefinitionError(
            "Configuration file must contain a dictionary with a list of flags.\n"
            "Example:\n"
            "description: 'My program'\n"
            "flags:\n"
            "  - name: 'verbose'\n"
            "    short: 'v'\n"
            "    type: 'bool'"
        )

    try:
        config = FlagsetConfig.model_validate(raw_config)
    except ValidationError as error:
        logger.error("Invalid flag configuration in '%s': %s", path, error)
        raise FlagDefinitionError(f"Invalid flag configuration in '{path}': {error}") from error

    logger.debug("Loaded %d flag(s) from '%s'.", len(config.flags), path)
    return config.to_parser()
