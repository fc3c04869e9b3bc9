"""Factory functions for obtaining resolvers.

All returned resolvers are immutable and thread-safe. The named policies are
singletons: repeated calls return the identical instance, so ``is`` checks
are a valid way to compare them.
"""

from __future__ import annotations

from zoneresolve.domain.types import ResolverKind
from zoneresolve.errors import UnknownResolverError
from zoneresolve.resolvers.base import ZoneResolver
from zoneresolve.resolvers.builtins import (
    BUILTINS,
    POST_TRANSITION,
    PRE_TRANSITION,
    PUSH_FORWARD,
    RETAIN_OFFSET,
    STRICT,
)
from zoneresolve.resolvers.combination import Combination


def strict() -> ZoneResolver:
    """Return the resolver that rejects every gap and overlap."""
    return STRICT


def pre_transition() -> ZoneResolver:
    """Return the resolver that picks the instant just before the transition.

    Gaps resolve to one microsecond before the transition instant at the
    earlier offset; overlaps keep the local time at the earlier offset.
    """
    return PRE_TRANSITION


def post_transition() -> ZoneResolver:
    """Return the resolver that picks the first instant after the transition.

    Gaps resolve to the transition instant at the later offset; overlaps keep
    the local time at the later offset.
    """
    return POST_TRANSITION


def retain_offset() -> ZoneResolver:
    """Return the post-transition resolver that keeps a still-valid previous offset."""
    return RETAIN_OFFSET


def push_forward() -> ZoneResolver:
    """Return the resolver that adds the gap width to local times in a gap."""
    return PUSH_FORWARD


def combination(
    gap_resolver: ZoneResolver | None = None,
    overlap_resolver: ZoneResolver | None = None,
) -> ZoneResolver:
    """Combine a gap policy with an overlap policy.

    ``None`` for either argument means :func:`strict`. When both arguments
    resolve to the same instance it is returned as-is rather than wrapped.
    """
    gap = strict() if gap_resolver is None else gap_resolver
    overlap = strict() if overlap_resolver is None else overlap_resolver
    if gap is overlap:
        return gap
    return Combination(gap, overlap)


def resolver_for(kind: str | ResolverKind) -> ZoneResolver:
    """Look up a built-in resolver by name (``"push_forward"``, ``"push-forward"``, ...)."""
    try:
        parsed = ResolverKind.parse(kind)
    except ValueError:
        raise UnknownResolverError(str(kind), [k.value for k in ResolverKind]) from None
    return BUILTINS[parsed]
