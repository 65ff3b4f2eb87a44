# Flagset CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseStatus`, the numeric result codes of a parse pass.
"""
from enum import IntEnum

MAX_ERROR_LEN = 1024


class ParseStatus(IntEnum):
    OK = 0
    MISSING_VALUE = 1
    UNKNOWN_FLAG = 2
    REQUIRED_FLAG_MISSING = 3
    CONVERSION_ERROR = 4
