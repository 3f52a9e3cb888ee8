"""Symbols: names as they appear in flow source.

A Symbol evaluates to whatever its name is bound to; quoted, it is plain data.
Names are interned, so two Symbols with the same name share one string.
"""

from __future__ import annotations

import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        if not name:
            raise ValueError("Symbol name must be a non-empty string")
        self.id: str = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        # Interned names compare by identity
        return self.id is other.id

    def __hash__(self) -> int:
        return hash((Symbol, self.id))

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        return self.id
