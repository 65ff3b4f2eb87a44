"""
Flagset CLI Flags

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ConversionError,
    FlagDefinitionError,
    FlagParseError,
    FlagsetError,
    FlagTypeError,
    MissingValueError,
    RequiredFlagMissingError,
    UnknownFlagError,
)
from .parser import Flag, FlagParser, Value, ValueKind
from .status import ParseStatus

logger = logging.getLogger("flagset")


__all__ = [
    "ConversionError",
    "Flag",
    "FlagDefinitionError",
    "FlagParseError",
    "FlagParser",
    "FlagTypeError",
    "FlagsetError",
    "MissingValueError",
    "ParseStatus",
    "RequiredFlagMissingError",
    "UnknownFlagError",
    "Value",
    "ValueKind",
]
