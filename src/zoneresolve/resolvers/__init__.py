"""Resolution strategies for gaps and overlaps."""

from zoneresolve.resolvers.base import ZoneResolver
from zoneresolve.resolvers.combination import Combination
from zoneresolve.resolvers.factory import (
    combination,
    post_transition,
    pre_transition,
    push_forward,
    resolver_for,
    retain_offset,
    strict,
)

__all__ = [
    "Combination",
    "ZoneResolver",
    "combination",
    "post_transition",
    "pre_transition",
    "push_forward",
    "resolver_for",
    "retain_offset",
    "strict",
]
