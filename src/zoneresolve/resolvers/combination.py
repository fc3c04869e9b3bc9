"""Combination — pair an independent gap policy with an overlap policy."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from zoneresolve.domain.values import Discontinuity, OffsetDateTime
from zoneresolve.resolvers.base import ZoneResolver


class Combination(ZoneResolver):
    """Delegate gaps to one resolver and overlaps to another.

    Errors raised by either delegate propagate unchanged. Prefer
    :func:`~zoneresolve.resolvers.factory.combination`, which applies the
    strict default and avoids wrapping a single resolver.
    """

    __slots__ = ("_gap_resolver", "_overlap_resolver")

    def __init__(self, gap_resolver: ZoneResolver, overlap_resolver: ZoneResolver) -> None:
        if gap_resolver is None or overlap_resolver is None:
            msg = "Combination requires both a gap resolver and an overlap resolver"
            raise TypeError(msg)
        self._gap_resolver = gap_resolver
        self._overlap_resolver = overlap_resolver

    @property
    def gap_resolver(self) -> ZoneResolver:
        return self._gap_resolver

    @property
    def overlap_resolver(self) -> ZoneResolver:
        return self._overlap_resolver

    @property
    def name(self) -> str:
        return f"combination({self._gap_resolver.name}, {self._overlap_resolver.name})"

    def handle_gap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        return self._gap_resolver.handle_gap(zone, discontinuity, local, previous)

    def handle_overlap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        return self._overlap_resolver.handle_overlap(zone, discontinuity, local, previous)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Combination):
            return NotImplemented
        return (
            self._gap_resolver is other._gap_resolver
            and self._overlap_resolver is other._overlap_resolver
        )

    def __hash__(self) -> int:
        return hash((id(self._gap_resolver), id(self._overlap_resolver)))
