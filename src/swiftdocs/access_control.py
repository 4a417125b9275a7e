"""
Access control levels for documented declarations.

The minimum access control level decides which declarations reach the
generated documentation: a minimum of ``internal`` documents internal and
public declarations but skips private ones.
"""

from __future__ import annotations

from enum import Enum

# Identifiers reported by the source-analysis backend for each level.
_ACCESSIBILITY_PREFIX = "source.lang.swift.accessibility."


class AccessControlLevel(str, Enum):
    """Visibility tier of a source declaration, ordered private < internal < public."""

    PRIVATE = "private"
    INTERNAL = "internal"
    PUBLIC = "public"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AccessControlLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, AccessControlLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, AccessControlLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, AccessControlLevel):
            return NotImplemented
        return self.rank >= other.rank

    def includes(self, level: AccessControlLevel) -> bool:
        """Whether a declaration at ``level`` is documented when this is the minimum."""
        return level >= self

    @classmethod
    def from_token(cls, token: str) -> AccessControlLevel | None:
        """Map a command-line token to a level.

        Only the exact tokens ``private``, ``internal`` and ``public`` are
        recognized; anything else returns None.
        """
        for level in cls:
            if level.value == token:
                return level
        return None

    @classmethod
    def from_accessibility(cls, identifier: str) -> AccessControlLevel | None:
        """Map a backend accessibility identifier, e.g.
        ``source.lang.swift.accessibility.internal``.
        """
        if not identifier.startswith(_ACCESSIBILITY_PREFIX):
            return None
        return cls.from_token(identifier[len(_ACCESSIBILITY_PREFIX):])


_RANKS = {
    AccessControlLevel.PRIVATE: 0,
    AccessControlLevel.INTERNAL: 1,
    AccessControlLevel.PUBLIC: 2,
}


__all__ = ["AccessControlLevel"]
