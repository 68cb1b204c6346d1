from __future__ import annotations

from enum import Enum


class RecordType(str, Enum):
    """Kind of attendance event stored in the ledger."""

    ENTRY = "entry"
    EXIT = "exit"

    @property
    def label(self) -> str:
        return {RecordType.ENTRY: "Entry", RecordType.EXIT: "Exit"}[self]
