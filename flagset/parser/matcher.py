# Flagset CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Name normalization and token matching for Flagset.

Flag names are case-insensitive and treat `_` and `-` as the same character. A
declared name is normalized once with `to_flag_name`; at match time both sides are
re-normalized character by character.

A raw token denotes a flag when it is one of:
- `-x` or `-x=value`, where `x` is the flag's short alias
- `--name` or `--name=value`, where `name` equals the canonical name

Functions:
- to_flag_name: Normalize a declared name (`Some_Flag` → `some-flag`).
- compare_names: Positional comparison, 0 when equal up to the shorter length.
- names_equal: Exact normalized equality (lengths must match).
- matches: Decide whether a raw token denotes a given flag.
"""
from flagset.parser.flag import Flag


def _fold(char: str) -> str:
    char = char.lower()
    return "-" if char == "_" else char


def to_flag_name(name: str) -> str:
    """Lowercase `name` and replace underscores with hyphens."""
    return "".join(_fold(char) for char in name)


def compare_names(lhs: str, rhs: str) -> int:
    """
    Compare two names character by character up to the shorter length.

    Returns:
        int: 0 if no position differs, otherwise the 1-based index of the first
            differing position.
    """
    for index, (lhs_char, rhs_char) in enumerate(zip(lhs, rhs)):
        if _fold(lhs_char) != _fold(rhs_char):
            return index + 1
    return 0


def names_equal(lhs: str, rhs: str) -> bool:
    """Return True if both names have the same length and compare equal."""
    return len(lhs) == len(rhs) and compare_names(lhs, rhs) == 0


def matches(flag: Flag, token: str) -> bool:
    """
    Decide whether `token` denotes `flag`.

    Args:
        flag (Flag): The declared flag.
        token (str): A raw command-line token.

    Returns:
        bool: True if the token is the flag's short or long form, bare or with an
            `=`-joined value.
    """
    if (
        flag.short
        and len(token) >= 2
        and token[0] == "-"
        and token[1] == flag.short
        and (len(token) == 2 or token[2] == "=")
    ):
        return True

    name_end = len(flag.name) + 2
    if not token.startswith("--") or len(token) < name_end:
        return False

    if len(token) > name_end and token[name_end] != "=":
        return False

    return compare_names(flag.name, token[2:name_end]) == 0
