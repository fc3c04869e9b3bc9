"""The five built-in resolution policies.

Each policy is a stateless singleton created at import time. Obtain them
through the factory functions in :mod:`zoneresolve.resolvers.factory`
rather than instantiating the classes.

| Policy         | Gap                              | Overlap                     |
|----------------|----------------------------------|-----------------------------|
| strict         | raise                            | raise                       |
| pre_transition | last instant before, old offset  | earlier offset              |
| post_transition| first instant after, new offset  | later offset                |
| retain_offset  | first instant after, new offset  | previous offset, else later |
| push_forward   | local + gap width, new offset    | later offset                |
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, ClassVar

from zoneresolve.domain.types import ResolverKind
from zoneresolve.domain.values import SMALLEST_UNIT, Discontinuity, OffsetDateTime
from zoneresolve.errors import GapUnresolvableError, OverlapUnresolvableError
from zoneresolve.resolvers.base import ZoneResolver

logger = logging.getLogger(__name__)


class BuiltinResolver(ZoneResolver):
    """Base for the named singleton policies."""

    __slots__ = ()

    kind: ClassVar[ResolverKind]

    @property
    def name(self) -> str:
        return str(self.kind)

    def _resolved(self, hook: str, local: datetime, result: OffsetDateTime) -> OffsetDateTime:
        logger.debug("%s resolved %s at %s to %s", self.name, hook, local.isoformat(), result)
        return result


class Strict(BuiltinResolver):
    """Reject every gap and overlap."""

    __slots__ = ()

    kind = ResolverKind.STRICT

    def handle_gap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        raise GapUnresolvableError(local, zone)

    def handle_overlap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        raise OverlapUnresolvableError(
            local, zone, discontinuity.offset_before, discontinuity.offset_after
        )


class PreTransition(BuiltinResolver):
    """Step back to the last valid instant for gaps; earlier offset for overlaps."""

    __slots__ = ()

    kind = ResolverKind.PRE_TRANSITION

    def handle_gap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        instant = discontinuity.transition - SMALLEST_UNIT
        result = OffsetDateTime.from_instant(instant, discontinuity.offset_before)
        return self._resolved("gap", local, result)

    def handle_overlap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        result = OffsetDateTime.of(local, discontinuity.offset_before)
        return self._resolved("overlap", local, result)


class PostTransition(BuiltinResolver):
    """Jump to the first valid instant for gaps; later offset for overlaps."""

    __slots__ = ()

    kind = ResolverKind.POST_TRANSITION

    def handle_gap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        return self._resolved("gap", local, discontinuity.transition_after)

    def handle_overlap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        result = OffsetDateTime.of(local, discontinuity.offset_after)
        return self._resolved("overlap", local, result)


class RetainOffset(BuiltinResolver):
    """Like post-transition, but keep the previous offset in an overlap.

    Meant for re-resolving after adding or subtracting time from an existing
    offset date-time: the caller's offset is kept whenever it is still one
    of the two valid offsets, avoiding a surprise one-hour jump.
    """

    __slots__ = ()

    kind = ResolverKind.RETAIN_OFFSET

    def handle_gap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        return self._resolved("gap", local, discontinuity.transition_after)

    def handle_overlap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        if previous is not None and discontinuity.is_valid_offset(previous.offset):
            offset = previous.offset
        else:
            offset = discontinuity.offset_after
        return self._resolved("overlap", local, OffsetDateTime.of(local, offset))


class PushForward(BuiltinResolver):
    """Shift gap times forward by the gap width; later offset for overlaps.

    Given a gap from 01:00 to 02:00 and a local time of 01:20, the result is
    02:20 at the later offset.
    """

    __slots__ = ()

    kind = ResolverKind.PUSH_FORWARD

    def handle_gap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        result = OffsetDateTime.of(local + discontinuity.size, discontinuity.offset_after)
        return self._resolved("gap", local, result)

    def handle_overlap(
        self,
        zone: Any,
        discontinuity: Discontinuity,
        local: datetime,
        previous: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        result = OffsetDateTime.of(local, discontinuity.offset_after)
        return self._resolved("overlap", local, result)


STRICT = Strict()
PRE_TRANSITION = PreTransition()
POST_TRANSITION = PostTransition()
RETAIN_OFFSET = RetainOffset()
PUSH_FORWARD = PushForward()

BUILTINS: dict[ResolverKind, BuiltinResolver] = {
    r.kind: r for r in (STRICT, PRE_TRANSITION, POST_TRANSITION, RETAIN_OFFSET, PUSH_FORWARD)
}
