"""Sentinel for request parameters that were not supplied.

Discord distinguishes an omitted field from an explicit ``null`` (which
usually clears the value), so request methods default to ``UNSET`` rather
than ``None``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final, Literal, Mapping, TypeAlias, TypeVar

T = TypeVar("T")


class _UnsetType(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _UnsetType.UNSET
Unset: TypeAlias = Literal[_UnsetType.UNSET]


def is_set(value: object) -> bool:
    return value is not UNSET


def strip_unset(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Drop entries whose value is UNSET; keeps explicit None."""
    return {k: v for k, v in mapping.items() if v is not UNSET}
