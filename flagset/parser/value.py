# Flagset CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueKind` and `Value`, the typed scalar values stored by Flagset.

A `Value` is an immutable tagged union over the supported scalar kinds:

- STRING: the raw token text
- BOOL: `true`/`false` literals or any integer literal (non-zero is True)
- INT: signed 32-bit integer
- LONG: signed 64-bit integer
- LONG_LONG: signed 64-bit integer
- DOUBLE: floating point number

Conversion from command-line text follows the C `strtol`/`strtod` grammars: leading
whitespace and a sign are allowed, integers may be written in hexadecimal (`0x1F`)
or octal (`017`), and the whole text must be consumed. Anything left over is a
`ConversionError`.

Example:
    Value.from_string("0x10", ValueKind.INT) → Value(kind=ValueKind.INT, data=16)
    Value.from_string("1", "bool")          → Value(kind=ValueKind.BOOL, data=True)
    Value.from_string("10.5", float).to_display_string() → "10.500000"
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from flagset.exceptions import ConversionError, FlagDefinitionError
from flagset.parser.parser_types import MAX_VALUE_LEN, truncate

_C_SPACE = r"[ \t\n\v\f\r]*"

_INTEGER_RE = re.compile(
    _C_SPACE + r"(?P<sign>[+-]?)(?P<body>0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)"
)

_DOUBLE_RE = re.compile(
    _C_SPACE
    + r"(?P<number>[+-]?(?:"
    r"(?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[iI][nN][fF](?:[iI][nN][iI][tT][yY])?"
    r"|[nN][aA][nN]"
    r"))"
)


class ValueKind(Enum):
    """
    Scalar kinds a flag may carry.

    Members:
        STRING: Keep the token text as-is.
        BOOL: Boolean flag; may be given without a value.
        INT: Signed 32-bit integer.
        LONG: Signed 64-bit integer.
        LONG_LONG: Signed 64-bit integer.
        DOUBLE: Floating point number.

    Aliases:
        - "string" → "str"
        - "boolean" → "bool"
        - "long_long", "longlong" → "ll"
        - "float" → "double"
        - Python types `str`, `bool`, `int` and `float`

    Example:
        ValueKind("float") → ValueKind.DOUBLE
    """

    STRING = "str"
    BOOL = "bool"
    INT = "int"
    LONG = "long"
    LONG_LONG = "ll"
    DOUBLE = "double"

    @classmethod
    def choices(cls) -> list[ValueKind]:
        """Return a list of all value kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "string": "str",
            "boolean": "bool",
            "long_long": "ll",
            "long-long": "ll",
            "longlong": "ll",
            "float": "double",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueKind:
        python_types = {
            str: cls.STRING,
            bool: cls.BOOL,
            int: cls.INT,
            float: cls.DOUBLE,
        }
        if isinstance(value, type) and value in python_types:
            return python_types[value]
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(str(kind) for kind in cls.choices())
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def bounds(self) -> tuple[int, int] | None:
        """Inclusive integer range for integral kinds, else None."""
        if self == ValueKind.INT:
            return -(2**31), 2**31 - 1
        if self in (ValueKind.LONG, ValueKind.LONG_LONG):
            return -(2**63), 2**63 - 1
        return None

    def __str__(self) -> str:
        """Return the string representation of the value kind."""
        return self.value


def parse_integer(raw: str) -> int:
    """
    Parse an integer literal using the `strtol(..., 0)` grammar.
    Empty text parses as 0.

    Raises:
        ValueError: If the text is not a complete integer literal.
    """
    if raw == "":
        return 0
    match = _INTEGER_RE.fullmatch(raw)
    if not match:
        raise ValueError(f"'{raw}' is not an integer literal")
    body = match.group("body")
    if body[:2] in ("0x", "0X"):
        number = int(body[2:], 16)
    elif len(body) > 1 and body[0] == "0":
        number = int(body[1:], 8)
    else:
        number = int(body, 10)
    return -number if match.group("sign") == "-" else number


def parse_double(raw: str) -> float:
    """
    Parse a floating point literal using the `strtod` grammar.
    Empty text parses as 0.0.

    Raises:
        ValueError: If the text is not a complete floating point literal.
    """
    if raw == "":
        return 0.0
    match = _DOUBLE_RE.fullmatch(raw)
    if not match:
        raise ValueError(f"'{raw}' is not a floating point literal")
    number = match.group("number")
    if match.group("hex"):
        return float.fromhex(number)
    return float(number)


def parse_bool(raw: str) -> bool:
    """
    Parse a boolean: the exact literals `true`/`false` or any integer literal.
    Empty text parses as False.

    Raises:
        ValueError: If the text is neither.
    """
    if raw == "true":
        return True
    if raw == "false":
        return False
    return parse_integer(raw) != 0


@dataclass(frozen=True)
class Value:
    """
    Immutable typed value produced from a flag token or a declared default.

    Attributes:
        kind (ValueKind): The kind tag.
        data (str | bool | int | float): The native Python value.
    """

    kind: ValueKind
    data: str | bool | int | float

    @classmethod
    def from_string(cls, raw: str, kind: ValueKind | str | type) -> Value:
        """
        Convert command-line text to a value of the given kind.

        Args:
            raw (str): The text to convert.
            kind (ValueKind | str | type): Target kind.

        Returns:
            Value: The converted value.

        Raises:
            ConversionError: If the text is not fully consumed by the grammar of
                `kind`, or an integer falls outside the kind's range.
        """
        kind = ValueKind(kind)
        try:
            if kind == ValueKind.STRING:
                return cls(kind, raw)
            if kind == ValueKind.BOOL:
                return cls(kind, parse_bool(raw))
            if kind == ValueKind.DOUBLE:
                return cls(kind, parse_double(raw))
            number = parse_integer(raw)
        except ValueError as error:
            raise ConversionError(f"can't convert '{raw}' to {kind}: {error}") from error
        return cls._checked_integer(number, kind, raw)

    @classmethod
    def _checked_integer(cls, number: int, kind: ValueKind, raw: Any) -> Value:
        assert kind.bounds is not None, "integral kind expected"
        low, high = kind.bounds
        if not low <= number <= high:
            raise ConversionError(
                f"can't convert '{raw}' to {kind}: out of range [{low}, {high}]"
            )
        return cls(kind, number)

    @classmethod
    def from_python(cls, obj: Any, kind: ValueKind | str | type) -> Value:
        """
        Build a value from a native Python object, e.g. a declared default.

        Strings are converted with `from_string`; native objects are checked
        against the kind.

        Raises:
            FlagDefinitionError: If the object does not fit the kind.
        """
        kind = ValueKind(kind)
        if isinstance(obj, Value):
            if obj.kind != kind:
                raise FlagDefinitionError(
                    f"Value of kind {obj.kind} cannot be used as {kind}"
                )
            return obj
        try:
            if isinstance(obj, str):
                return cls.from_string(obj, kind)
            if kind == ValueKind.BOOL and isinstance(obj, (bool, int)):
                return cls(kind, bool(obj))
            if kind == ValueKind.DOUBLE and isinstance(obj, (int, float)):
                if not isinstance(obj, bool):
                    return cls(kind, float(obj))
            if kind.bounds is not None and isinstance(obj, int):
                if not isinstance(obj, bool):
                    return cls._checked_integer(obj, kind, obj)
        except ConversionError as error:
            raise FlagDefinitionError(str(error)) from error
        raise FlagDefinitionError(
            f"{type(obj).__name__} value {obj!r} cannot be used as {kind}"
        )

    def to_display_string(self) -> str:
        """Return a human-readable rendering, truncated to `MAX_VALUE_LEN - 1`."""
        if self.kind == ValueKind.BOOL:
            text = "true" if self.data else "false"
        elif self.kind == ValueKind.DOUBLE:
            text = f"{self.data:f}"
        else:
            text = str(self.data)
        return truncate(text, MAX_VALUE_LEN)

    def __str__(self) -> str:
        return self.to_display_string()
