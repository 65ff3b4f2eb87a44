# Flagset CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagParser`, the flag registry and parsing engine of Flagset.

A `FlagParser` holds an ordered list of declared flags and a `ResultStore`. Parsing
walks a raw argument vector, matches flag-shaped tokens against the declared flags,
converts their values and records them, leaving positional arguments (and, when
asked, unknown flags) in place.

Key Features:
- Declarative flag registration via `add_flag()` and typed helpers (`add_int()`, ...)
- Long (`--name`, `--name=value`, `--name value`) and short (`-x`, `-x=value`,
  `-x value`) forms
- Boolean flags with implied `true` or an explicit following value
- Repeated flags accumulate, in command-line order
- Defaults injected for absent flags, fail-fast required-flag validation
- Optional compaction: matched tokens are dropped from the returned token list
- Plain-text usage listing and Rich-powered help rendering

Public Interface:
- `add_flag(...)`: Register a new flag with kind, alias and default/required settings.
- `parse(...)`: Parse an argument vector, raising `FlagParseError` on failure.
- `parse_status(...)`: Same, returning a `ParseStatus` code instead of raising.
- `count(...)`, `get(...)`, `first(...)`: Retrieve parsed values.
- `get_usage()`, `render_help()`: Usage text.

Example Usage:
    parser = FlagParser("description:")
    parser.add_str("string_req", required=True)
    parser.add_int("int_req", short="i", required=True)

    remaining = parser.parse(
        ["prog", "--string-req", "hi", "-i", "5"], compact_input=True
    )

    # remaining == ["prog"]
    # parser.first("string-req", str) == "hi"
    # parser.first("int-req", int) == 5

Design Notes:
The caller's argument list is never modified; compaction works on a copy, which is
returned. Parsing is not transactional: values recorded before a failure stay in the
result store, and the failure's `remaining` list reflects compaction only up to the
failing token.
"""
from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape

from flagset.console import console
from flagset.exceptions import (
    ConversionError,
    FlagDefinitionError,
    FlagParseError,
    MissingValueError,
    RequiredFlagMissingError,
    UnknownFlagError,
)
from flagset.logger import logger
from flagset.parser.flag import Flag
from flagset.parser.matcher import matches, names_equal, to_flag_name
from flagset.parser.parser_types import MAX_USAGE_COLUMN_LEN, MISSING, truncate
from flagset.parser.result_store import ResultEntry, ResultStore
from flagset.parser.value import Value, ValueKind
from flagset.status import ParseStatus


class FlagParser:
    """
    Registry of declared flags and the engine that parses argument vectors
    against them.

    Features:
    - Ordered flag registry; the first registered match wins.
    - Name normalization (case-insensitive, `_` and `-` interchangeable).
    - Typed values (string, bool, 32-bit int, 64-bit long/long long, double).
    - Repeated flags, defaults and required flags.
    - Unknown flags either fail the parse or are left in place.
    - Render help using the Rich library.
    """

    def __init__(self, description: str | None = None) -> None:
        """Initialize the FlagParser."""
        self.console: Console = console
        self.description: str = description or ""
        self._flags: list[Flag] = []
        self._results: ResultStore = ResultStore()

    @property
    def flags(self) -> list[Flag]:
        """Declared flags, in registration order."""
        return list(self._flags)

    @property
    def results(self) -> ResultStore:
        return self._results

    def _validate_name(self, name: str) -> str:
        if not isinstance(name, str):
            raise FlagDefinitionError(f"Flag name {name!r} must be a string")
        if not name or name.startswith("-"):
            raise FlagDefinitionError(
                f"Flag name '{name}' must be non-empty and given without leading '-'"
            )
        if "=" in name or any(char.isspace() for char in name):
            raise FlagDefinitionError(
                f"Flag name '{name}' must not contain '=' or whitespace"
            )
        return to_flag_name(name)

    def _validate_short(self, short: str | None) -> str | None:
        if short is None or short == "":
            return None
        if not isinstance(short, str) or len(short) != 1:
            raise FlagDefinitionError(
                f"Short alias {short!r} must be a single character"
            )
        if short in ("-", "=") or short.isspace():
            raise FlagDefinitionError(f"Short alias '{short}' is not allowed")
        return short

    def _validate_kind(self, kind: ValueKind | str | type) -> ValueKind:
        try:
            return ValueKind(kind)
        except ValueError as error:
            raise FlagDefinitionError(str(error)) from error

    def _resolve_default(self, default: Any, kind: ValueKind, name: str) -> Value | None:
        if default is MISSING or default is None:
            return None
        try:
            return Value.from_python(default, kind)
        except FlagDefinitionError as error:
            raise FlagDefinitionError(
                f"Default value {default!r} for '{name}' is not a valid {kind}: {error}"
            ) from error

    def add_flag(
        self,
        name: str,
        kind: ValueKind | str | type = ValueKind.STRING,
        short: str | None = None,
        help: str | None = "",
        required: bool = False,
        default: Any = MISSING,
    ) -> Flag:
        """
        Declare a new flag.

        Args:
            name (str): Flag name; normalized to lowercase with `-` for `_`.
            kind (ValueKind | str | type): Kind values are converted to.
            short (str | None): Optional single-character alias.
            help (str | None): Help text for the usage listing.
            required (bool): Fail parsing when the flag is absent and has no default.
            default (Any): Value used when the flag is absent. A string is parsed
                like command-line text; native values must fit the kind.

        Returns:
            Flag: The registered flag.

        Raises:
            FlagDefinitionError: If any setting is invalid.
        """
        kind = self._validate_kind(kind)
        canonical = self._validate_name(name)
        short = self._validate_short(short)
        default_value = self._resolve_default(default, kind, canonical)
        if not isinstance(required, bool):
            raise FlagDefinitionError(
                f"required must be a boolean, got {type(required).__name__}"
            )

        existing = self.get_flag(canonical)
        if existing:
            logger.warning(
                "Flag '%s' is already defined; the first definition wins.", canonical
            )
        if short and any(flag.short == short for flag in self._flags):
            logger.warning(
                "Short alias '-%s' is already used; the first definition wins.", short
            )

        flag = Flag(
            name=canonical,
            kind=kind,
            short=short,
            help=help or "",
            required=required,
            default=default_value,
        )
        self._flags.append(flag)
        logger.debug("Registered flag '%s' (%s).", canonical, kind)
        return flag

    def add_str(self, name: str, **kwargs: Any) -> Flag:
        return self.add_flag(name, ValueKind.STRING, **kwargs)

    def add_bool(self, name: str, **kwargs: Any) -> Flag:
        return self.add_flag(name, ValueKind.BOOL, **kwargs)

    def add_int(self, name: str, **kwargs: Any) -> Flag:
        return self.add_flag(name, ValueKind.INT, **kwargs)

    def add_long(self, name: str, **kwargs: Any) -> Flag:
        return self.add_flag(name, ValueKind.LONG, **kwargs)

    def add_long_long(self, name: str, **kwargs: Any) -> Flag:
        return self.add_flag(name, ValueKind.LONG_LONG, **kwargs)

    def add_double(self, name: str, **kwargs: Any) -> Flag:
        return self.add_flag(name, ValueKind.DOUBLE, **kwargs)

    def get_flag(self, name: str) -> Flag | None:
        """
        Return the first declared flag with the given name.

        Args:
            name (str): Flag name; case and `_`/`-` are ignored.

        Returns:
            Flag or None: Matching flag, if declared.
        """
        return next((flag for flag in self._flags if names_equal(flag.name, name)), None)

    def _find_flag(self, token: str) -> Flag | None:
        return next((flag for flag in self._flags if matches(flag, token)), None)

    def _error(
        self, error_type: type[FlagParseError], message: str, tokens: list[str]
    ) -> FlagParseError:
        logger.debug("Parsing failed (%s): %s", error_type.status.name, message)
        return error_type(message, remaining=list(tokens))

    def _source_value(self, flag: Flag, tokens: list[str], index: int) -> tuple[str, int]:
        """Return the raw value for the flag at `index` and the tokens it spans."""
        token = tokens[index]
        _, separator, joined = token.partition("=")
        if separator:
            return joined, 1

        is_last = index == len(tokens) - 1
        if flag.is_bool:
            if is_last or tokens[index + 1].startswith("-"):
                return "true", 1
            return tokens[index + 1], 2

        if is_last:
            raise self._error(MissingValueError, f"no value for {token}", tokens)
        return tokens[index + 1], 2

    def _apply_defaults(self, tokens: list[str]) -> None:
        for flag in self._flags:
            if flag.found:
                continue
            if flag.default is not None:
                self._results.append(ResultEntry(flag.name, flag.kind, flag.default))
            elif flag.required:
                raise self._error(
                    RequiredFlagMissingError,
                    f"can't find required flag: --{flag.name}",
                    tokens,
                )

    def parse(
        self,
        argv: Sequence[str],
        ignore_unknown_flags: bool = False,
        compact_input: bool = False,
    ) -> list[str]:
        """
        Parse an argument vector and record the values of declared flags.

        Args:
            argv (Sequence[str]): Raw arguments; index 0 is the program name and is
                never matched.
            ignore_unknown_flags (bool): Leave unknown flags in place instead of failing.
            compact_input (bool): Drop matched flag tokens (and the values they
                consumed) from the returned list.

        Returns:
            list[str]: The remaining tokens. A plain copy of `argv` unless
                `compact_input` is set.

        Raises:
            MissingValueError: A non-boolean flag was last and had no value.
            UnknownFlagError: An unknown flag was found and is not ignored.
            ConversionError: A value did not convert to its flag's kind.
            RequiredFlagMissingError: A required flag without default was absent.
        """
        tokens = list(argv)
        logger.debug(
            "Parsing %d token(s) against %d flag(s).", len(tokens), len(self._flags)
        )

        index = 1
        while index < len(tokens):
            token = tokens[index]
            if not token.startswith("-"):
                index += 1
                continue

            flag = self._find_flag(token)
            if flag is None:
                if not ignore_unknown_flags:
                    raise self._error(UnknownFlagError, f"unknown flag: {token}", tokens)
                logger.debug("Ignoring unknown flag '%s'.", token)
                index += 1
                continue

            raw, span = self._source_value(flag, tokens, index)
            try:
                value = Value.from_string(raw, flag.kind)
            except ConversionError as error:
                raise self._error(
                    ConversionError, f"can't convert: {token} {raw}", tokens
                ) from error

            self._results.append(ResultEntry(flag.name, flag.kind, value))
            flag.mark_found()

            if compact_input:
                del tokens[index : index + span]
            else:
                index += span

        self._apply_defaults(tokens)
        return tokens

    def parse_status(
        self,
        argv: Sequence[str],
        ignore_unknown_flags: bool = False,
        compact_input: bool = False,
        error_sink: list[str] | None = None,
    ) -> tuple[ParseStatus, list[str]]:
        """
        Parse like `parse()`, reporting failures as a status code.

        Args:
            error_sink (list[str] | None): If given, the failure message is
                appended to it.

        Returns:
            tuple: (status, remaining tokens). The status is `ParseStatus.OK` on
                success.
        """
        try:
            remaining = self.parse(argv, ignore_unknown_flags, compact_input)
        except FlagParseError as error:
            if error_sink is not None:
                error_sink.append(error.message)
            return error.status, error.remaining
        return ParseStatus.OK, remaining

    def count(self, name: str) -> int:
        """Return how many values were recorded for `name`."""
        return self._results.count(name)

    def get(
        self, name: str, kind: ValueKind | str | type, max_count: int | None = None
    ) -> list[Any]:
        """Return recorded values for `name`; see `ResultStore.get`."""
        return self._results.get(name, kind, max_count)

    def first(
        self, name: str, kind: ValueKind | str | type, default: Any = None
    ) -> Any:
        """Return the first recorded value for `name`, or `default`."""
        return self._results.first(name, kind, default)

    def reset(self) -> None:
        """Clear recorded values and the found state of every flag."""
        self._results.clear()
        for flag in self._flags:
            flag.reset()

    def _flag_columns(self) -> list[str]:
        return [
            truncate(flag.get_flag_text(), MAX_USAGE_COLUMN_LEN) for flag in self._flags
        ]

    def get_usage(self) -> str:
        """
        Render the usage listing.

        Returns:
            str: The description line (if any), then one line per flag with the
                flag column padded to the widest column, followed by the help text.
        """
        lines: list[str] = []
        if self.description:
            lines.append(f"{self.description}\n")
        columns = self._flag_columns()
        width = max((len(column) for column in columns), default=0)
        for flag, column in zip(self._flags, columns):
            lines.append(f"{column:<{width}} {flag.help}\n")
        return "".join(lines)

    def render_help(self) -> None:
        """
        Print the usage listing using Rich output.

        Flag columns are highlighted; default values are dimmed.
        """
        if self.description:
            self.console.print(f"[bold]{escape(self.description)}[/bold]")
        columns = self._flag_columns()
        width = max((len(column) for column in columns), default=0)
        for flag, column in zip(self._flags, columns):
            padding = " " * (width - len(column))
            flag_text, _, default_text = column.partition(" (=")
            line = f"[flag]{escape(flag_text)}[/flag]"
            if default_text:
                line += f" [default]{escape('(=' + default_text)}[/default]"
            self.console.print(f"{line}{padding} {escape(flag.help)}")

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        required = sum(flag.required for flag in self._flags)
        defaults = sum(flag.has_default for flag in self._flags)
        return (
            f"FlagParser(flags={len(self._flags)}, required={required}, "
            f"defaults={defaults}, results={len(self._results)})"
        )

    def __repr__(self) -> str:
        return str(self)
