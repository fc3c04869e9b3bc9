"""zoneresolve — resolve local date-times that fall into time-zone gaps and overlaps."""

from zoneresolve.domain.types import DiscontinuityKind, ResolverKind
from zoneresolve.domain.values import Discontinuity, OffsetDateTime
from zoneresolve.errors import (
    ConfigError,
    GapUnresolvableError,
    OverlapUnresolvableError,
    ResolutionError,
    UnknownResolverError,
    ZoneResolveError,
)
from zoneresolve.resolvers import (
    Combination,
    ZoneResolver,
    combination,
    post_transition,
    pre_transition,
    push_forward,
    resolver_for,
    retain_offset,
    strict,
)

__version__ = "0.1.0"

__all__ = [
    "Combination",
    "ConfigError",
    "Discontinuity",
    "DiscontinuityKind",
    "GapUnresolvableError",
    "OffsetDateTime",
    "OverlapUnresolvableError",
    "ResolutionError",
    "ResolverKind",
    "UnknownResolverError",
    "ZoneResolveError",
    "ZoneResolver",
    "combination",
    "post_transition",
    "pre_transition",
    "push_forward",
    "resolver_for",
    "retain_offset",
    "strict",
]
