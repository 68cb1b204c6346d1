"""Marker for fields left out of a partial update."""

from __future__ import annotations

from enum import Enum


class UnsetType(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = UnsetType.UNSET


def is_set(value) -> bool:
    return value is not UNSET
