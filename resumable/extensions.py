"""Protocol extensions and lookup of enum members by their display name."""

from __future__ import annotations

import functools
from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


def enum_from_str(enum_cls: type[E], value: str, kind: str) -> E:
    """Return the member of ``enum_cls`` whose ``str()`` equals ``value``.

    Raises ``ValueError`` listing every available member when nothing matches.
    """
    for member in enum_cls:
        if str(member) == value:
            return member
    available = "\n".join(f"\t* {member}" for member in enum_cls)
    raise ValueError(
        f"Unknown {kind} '{value}'.\n Available {kind}s:\n{available}"
    )


@functools.total_ordering
class Extensions(Enum):
    """Protocol extensions the server can announce and serve."""

    CREATION_DEFER_LENGTH = "creation-defer-length"
    CREATION_WITH_UPLOAD = "creation-with-upload"
    CREATION = "creation"
    TERMINATION = "termination"
    CONCATENATION = "concatenation"
    GETTING = "getting"
    CHECKSUM = "checksum"

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Extensions):
            return NotImplemented
        order = type(self)._member_names_
        return order.index(self.name) < order.index(other.name)

    @classmethod
    def from_str(cls, value: str) -> "Extensions":
        """Parse an extension from its protocol name."""
        return enum_from_str(cls, value, "extension")