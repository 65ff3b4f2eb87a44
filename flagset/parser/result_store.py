# Flagset CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the `ResultStore`, the ordered record of values resolved by a `FlagParser`.

Every matched token and every injected default appends one `ResultEntry`. A flag
given several times has several entries, kept in the order they were encountered on
the command line, with the default (if any) last. Entries are never modified after
they are appended.

Lookups use exact normalized-name equality: case and `_`/`-` are ignored, but a
longer or shorter name never matches.

Public Interface:
- append(entry): Record a resolved value.
- count(name): Number of entries for a flag.
- get(name, kind, max_count): Native values for a flag, in order.
- first(name, kind, default): First value for a flag, or a fallback.
- clear(): Drop all entries.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from flagset.exceptions import FlagTypeError
from flagset.parser.matcher import names_equal
from flagset.parser.value import Value, ValueKind


@dataclass(frozen=True)
class ResultEntry:
    """One resolved (name, kind, value) record."""

    name: str
    kind: ValueKind
    value: Value


class ResultStore:
    """Append-only sequence of `ResultEntry` records with typed retrieval by name."""

    def __init__(self) -> None:
        self._entries: list[ResultEntry] = []

    def append(self, entry: ResultEntry) -> None:
        self._entries.append(entry)

    def clear(self) -> None:
        self._entries.clear()

    def entries_for(self, name: str) -> Iterator[ResultEntry]:
        return (entry for entry in self._entries if names_equal(entry.name, name))

    def count(self, name: str) -> int:
        """Return the number of entries recorded for `name`."""
        return sum(1 for _ in self.entries_for(name))

    def get(
        self,
        name: str,
        kind: ValueKind | str | type,
        max_count: int | None = None,
    ) -> list[Any]:
        """
        Return up to `max_count` values recorded for `name`, in append order.

        Args:
            name (str): Flag name; case and `_`/`-` are ignored.
            kind (ValueKind | str | type): Expected kind of the values.
            max_count (int | None): Upper bound on returned values; None for all.

        Returns:
            list[Any]: Native Python values. Empty if the flag has no entries.

        Raises:
            FlagTypeError: If the flag's entries are of a different kind.
        """
        kind = ValueKind(kind)
        values: list[Any] = []
        for entry in self.entries_for(name):
            if max_count is not None and len(values) >= max_count:
                break
            if entry.kind != kind:
                raise FlagTypeError(
                    f"Flag '{entry.name}' holds {entry.kind} values, not {kind}"
                )
            values.append(entry.value.data)
        return values

    def first(
        self, name: str, kind: ValueKind | str | type, default: Any = None
    ) -> Any:
        """Return the first value recorded for `name`, or `default` if none."""
        values = self.get(name, kind, max_count=1)
        return values[0] if values else default

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ResultEntry]:
        return iter(self._entries)
