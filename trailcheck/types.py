"""
Type definitions for trailcheck.

Provides the MISSING sentinel, error kinds and type aliases.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Hashable, Mapping


class Absent(Enum):
    """
    Sentinel for "no value at all".

    MISSING is what a validator sees for an absent field or an omitted
    argument. It is distinct from None, which is a present-but-empty value:
    - {} -> field "name" reads as MISSING
    - {"name": None} -> field "name" reads as None
    """

    MISSING = "missing"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = Absent.MISSING


class Index(int):
    """
    Position of an element inside a sequence.

    Kept apart from plain ints so an integer mapping key is never mistaken for
    an element position when a path is rendered.
    """

    def __repr__(self) -> str:
        return f"Index({int(self)})"


class ErrorKind(Enum):
    """The three failure kinds an error policy can construct."""

    INVALID = "invalid"
    MISSING = "missing"
    UNSUPPORTED = "unsupported"


# Type aliases
Predicate = Callable[[Any], Any]
Schema = Mapping[str, Predicate]
Segment = Hashable
Path = tuple[Segment, ...]
ErrorFactory = Callable[[], Exception]
