# Flagset CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Flagset.

Parse failures carry a numeric `ParseStatus` so callers that prefer return codes
(see `FlagParser.parse_status`) can map them back to the classic exit-code contract.

All exceptions inherit from `FlagsetError`, the base exception for the package.

Exception Hierarchy:
- FlagsetError
    ├── FlagDefinitionError
    ├── FlagTypeError
    └── FlagParseError
        ├── MissingValueError
        ├── UnknownFlagError
        ├── RequiredFlagMissingError
        └── ConversionError

Parse errors are raised by `FlagParser.parse` and should be caught and reported
to the end user, usually together with the usage text.
"""
from __future__ import annotations

from flagset.status import MAX_ERROR_LEN, ParseStatus


class FlagsetError(Exception):
    """Base exception for Flagset."""


class FlagDefinitionError(FlagsetError):
    """Exception raised when a flag is declared with invalid settings."""


class FlagTypeError(FlagsetError):
    """Exception raised when parsed values are requested with the wrong kind."""


class FlagParseError(FlagsetError):
    """
    Exception raised when the command line cannot be parsed.

    Attributes:
        status (ParseStatus): Non-zero status code of the failure.
        message (str): Human-readable message, truncated to `MAX_ERROR_LEN - 1`.
        remaining (list[str]): Working token list at the time of the failure.
            When compaction was requested it is compacted only up to the
            failing token.
    """

    status: ParseStatus = ParseStatus.OK

    def __init__(self, message: str, remaining: list[str] | None = None) -> None:
        if len(message) >= MAX_ERROR_LEN:
            message = message[: MAX_ERROR_LEN - 1]
        super().__init__(message)
        self.message: str = message
        self.remaining: list[str] = remaining if remaining is not None else []

    @property
    def code(self) -> int:
        return int(self.status)


class MissingValueError(FlagParseError):
    """A non-boolean flag was the last token and had no value attached."""

    status = ParseStatus.MISSING_VALUE


class UnknownFlagError(FlagParseError):
    """A flag-shaped token matched no declared flag."""

    status = ParseStatus.UNKNOWN_FLAG


class RequiredFlagMissingError(FlagParseError):
    """A required flag was never supplied and has no default."""

    status = ParseStatus.REQUIRED_FLAG_MISSING


class ConversionError(FlagParseError):
    """A value could not be converted to the declared kind of its flag."""

    status = ParseStatus.CONVERSION_ERROR
