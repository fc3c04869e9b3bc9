"""ZoneResolver — the contract every resolution strategy implements.

A dispatcher that has classified a local date-time as lying in a gap or an
overlap calls exactly one hook on the active resolver. The resolver returns
the offset date-time the local time denotes, or raises a
:class:`~zoneresolve.errors.ResolutionError`.

INVARIANT: Resolvers are pure functions of their four inputs. They hold no
mutable state and are safe to share between threads without locking.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from zoneresolve.domain.values import Discontinuity, OffsetDateTime


class ZoneResolver(ABC):
    """Strategy for resolving local date-times inside gaps and overlaps.

    Subclasses implement both hooks. Custom strategies are supported: any
    subclass can be passed to :func:`~zoneresolve.resolvers.factory.combination`.

    Usage::

        class EarlierOffset(ZoneResolver):
            def handle_gap(self, zone, discontinuity, local, previous=None):
                ...

            def handle_overlap(self, zone, discontinuity, local, previous=None):
                return OffsetDateTime.of(local, discontinuity.offset_before)
    """

    __slots__ = ()

    @property
    def name(self) -> str:
        """Stable identifier used in logs and reprs."""
        return type(self).__name__

    @abstractmethod
    def handle_gap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        """Resolve a *local* date-time that does not exist in *zone*.

        Args:
            zone: Zone identity, used only for diagnostics.
            discontinuity: The gap *local* falls into.
            local: The nonexistent wall-clock date-time.
            previous: The offset date-time *local* was derived from, when the
                call results from adjusting an existing value.

        Returns:
            An offset date-time whose offset is valid for its local part.
            The local part may differ from *local*.
        """

    @abstractmethod
    def handle_overlap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        """Resolve a *local* date-time that occurs twice in *zone*.

        Returns *local* paired with either ``discontinuity.offset_before`` or
        ``discontinuity.offset_after``; the local part is never changed.
        """

    def __repr__(self) -> str:
        return f"<ZoneResolver {self.name}>"
