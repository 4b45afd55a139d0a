"""Value objects for the authorization domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers.
"""

from __future__ import annotations

from dataclasses import dataclass


def _parse_positive_int(value: str | int, label: str) -> int:
    """Parse a positive integer identifier.

    Raises:
        ValueError: If value is not a positive integer
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid {label}: {value}")
    try:
        parsed = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid {label}: {value}") from e
    if parsed < 1:
        raise ValueError(f"Invalid {label}: {value}")
    return parsed


@dataclass(frozen=True)
class SubjectId:
    """Identifier for a Subject (an authenticated principal).

    Subjects are stored with integer surrogate keys.
    """

    value: int

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)

    @classmethod
    def from_string(cls, value: str) -> SubjectId:
        """Create SubjectId from a string, e.g. a token ``sub`` claim.

        Args:
            value: Decimal string of a positive integer

        Returns:
            SubjectId instance

        Raises:
            ValueError: If value is not a positive integer
        """
        return cls(value=_parse_positive_int(value, "SubjectId"))


@dataclass(frozen=True)
class ResourceId:
    """Identifier for an owned Resource."""

    value: int

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)
