"""Classification enums for discontinuities and built-in resolvers."""

from __future__ import annotations

from enum import StrEnum


class DiscontinuityKind(StrEnum):
    """Direction of an offset change at a transition."""

    GAP = "gap"
    OVERLAP = "overlap"


class ResolverKind(StrEnum):
    """Names of the built-in resolution policies."""

    STRICT = "strict"
    PRE_TRANSITION = "pre_transition"
    POST_TRANSITION = "post_transition"
    RETAIN_OFFSET = "retain_offset"
    PUSH_FORWARD = "push_forward"

    @classmethod
    def parse(cls, value: str | ResolverKind) -> ResolverKind:
        """Parse *value* leniently: case-insensitive, ``-`` accepted for ``_``.

        Raises ``ValueError`` for names that match no policy.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        return cls(normalized)
