# Flagset CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Shared constants and sentinels for the Flagset parser.

Contents:
- `MISSING`: Sentinel marking a flag declared without a default value.
- `MAX_VALUE_LEN`: Size of the buffer a value display string is rendered into; renders
  are truncated to `MAX_VALUE_LEN - 1` characters.
- `MAX_USAGE_COLUMN_LEN`: Same limit for the left-hand flag column of the usage text.
"""
from typing import Any, Final

MAX_VALUE_LEN: Final[int] = 64
MAX_USAGE_COLUMN_LEN: Final[int] = 128


class _MissingType:
    """Type of the `MISSING` sentinel."""

    _instance: "_MissingType | None" = None

    def __new__(cls) -> "_MissingType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _MissingType()


def truncate(text: str, buffer_len: int) -> str:
    """Truncate `text` the way a NUL-terminated buffer of `buffer_len` would."""
    if len(text) >= buffer_len:
        return text[: buffer_len - 1]
    return text
