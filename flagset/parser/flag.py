# Flagset CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Flag` dataclass used by `FlagParser` to describe one declared
command-line flag.

Each `Flag` carries its canonical (normalized) name, an optional one-character
alias, the `ValueKind` its values are converted to, and its default/required
attributes. The `found` field is the only mutable state: a parse pass sets it once
a matching token is seen, and it decides whether the default is injected afterwards.

Flags should be created with `FlagParser.add_flag()` or one of its typed helpers,
or declared in a YAML/TOML file loaded by `flagset.config.loader`.

Key Attributes:
- `name`: Canonical name, lowercase with `-` in place of `_`
- `short`: Optional single-character alias, used as `-x`
- `kind`: `ValueKind` of the flag's values
- `has_default` / `default`: Value injected when the flag is never supplied
- `required`: Parsing fails when the flag is missing and has no default
- `found`: Set during parsing
"""
from __future__ import annotations

from dataclasses import dataclass, field

from flagset.parser.value import Value, ValueKind


@dataclass
class Flag:
    """
    Represents a declared command-line flag.

    Attributes:
        name (str): Canonical flag name, matched as `--name`.
        kind (ValueKind): Kind the flag's values are converted to.
        short (str | None): Single-character alias, matched as `-x`.
        help (str): Help text for the usage listing.
        required (bool): True if parsing fails when the flag is absent.
        default (Value | None): Value injected when the flag is absent.
        found (bool): True once a parse pass has matched the flag.
    """

    name: str
    kind: ValueKind = ValueKind.STRING
    short: str | None = None
    help: str = ""
    required: bool = False
    default: Value | None = None
    found: bool = field(default=False, compare=False)

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def is_bool(self) -> bool:
        return self.kind == ValueKind.BOOL

    def get_flag_text(self) -> str:
        """Get the flag column text used in the usage listing."""
        if self.short:
            text = f"  -{self.short}, --{self.name}"
        else:
            text = f"      --{self.name}"
        if self.default is not None:
            text = f"{text} (={self.default.to_display_string()})"
        return text

    def mark_found(self) -> None:
        self.found = True

    def reset(self) -> None:
        """Reset the found state."""
        self.found = False
