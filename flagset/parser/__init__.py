"""
Flagset CLI Flags

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .flag import Flag
from .flag_parser import FlagParser
from .matcher import compare_names, matches, names_equal, to_flag_name
from .parser_types import MISSING
from .result_store import ResultEntry, ResultStore
from .value import Value, ValueKind

__all__ = [
    "Flag",
    "FlagParser",
    "MISSING",
    "ResultEntry",
    "ResultStore",
    "Value",
    "ValueKind",
    "compare_names",
    "matches",
    "names_equal",
    "to_flag_name",
]
