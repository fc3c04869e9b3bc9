"""Local, offset and discontinuity value types.

A local date-time is a naive ``datetime.datetime``; an offset is a
``datetime.timedelta``. Both are immutable stdlib values. The two composite
types below are frozen pydantic models so they validate on construction and
can be shared freely between threads.

INVARIANT: A Discontinuity always has ``offset_before != offset_after``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from zoneresolve.domain.types import DiscontinuityKind

# Python datetimes resolve to the microsecond.
SMALLEST_UNIT = timedelta(microseconds=1)

MAX_OFFSET = timedelta(hours=24)


def format_offset(offset: timedelta) -> str:
    """Render *offset* as ``+HH:MM`` (``+HH:MM:SS`` when seconds are present)."""
    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, rem = divmod(abs(total), 3600)
    minutes, seconds = divmod(rem, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


def zone_name(zone: Any) -> str:
    """Return a display name for a zone identity (``key`` attribute or ``str``)."""
    key = getattr(zone, "key", None)
    if isinstance(key, str):
        return key
    if isinstance(zone, tzinfo):
        name = zone.tzname(None)
        if name:
            return name
    return str(zone)


def _check_offset(value: timedelta) -> timedelta:
    if not -MAX_OFFSET < value < MAX_OFFSET:
        msg = f"offset must be strictly between -24:00 and +24:00, got {value}"
        raise ValueError(msg)
    if value % timedelta(seconds=1):
        msg = f"offset must be a whole number of seconds, got {value}"
        raise ValueError(msg)
    return value


class OffsetDateTime(BaseModel):
    """A local date-time paired with a fixed UTC offset.

    Attributes:
        local: Naive wall-clock date-time.
        offset: UTC offset in effect for *local*.
    """

    model_config = {"frozen": True}

    local: datetime
    offset: timedelta

    @field_validator("local")
    @classmethod
    def _local_is_naive(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            msg = "local date-time must be naive (no tzinfo)"
            raise ValueError(msg)
        return value

    @field_validator("offset")
    @classmethod
    def _offset_in_range(cls, value: timedelta) -> timedelta:
        return _check_offset(value)

    @classmethod
    def of(cls, local: datetime, offset: timedelta) -> OffsetDateTime:
        """Pair *local* with *offset*."""
        return cls(local=local, offset=offset)

    @classmethod
    def from_instant(cls, instant: datetime, offset: timedelta) -> OffsetDateTime:
        """Render the aware *instant* as local time under *offset*."""
        if instant.tzinfo is None:
            msg = "instant must be timezone-aware"
            raise ValueError(msg)
        utc = instant.astimezone(timezone.utc).replace(tzinfo=None)
        return cls(local=utc + offset, offset=offset)

    def to_instant(self) -> datetime:
        """Return the aware UTC datetime this value denotes."""
        return (self.local - self.offset).replace(tzinfo=timezone.utc)

    def to_datetime(self) -> datetime:
        """Return an aware datetime carrying a fixed ``timezone(offset)``."""
        return self.local.replace(tzinfo=timezone(self.offset))

    def __str__(self) -> str:
        return f"{self.local.isoformat()}{format_offset(self.offset)}"


class Discontinuity(BaseModel):
    """A single transition in a zone's offset function.

    Gap: ``offset_after > offset_before``, the clock skips forward by
    :attr:`size`. Overlap: ``offset_after < offset_before``, local times in
    the repeated span are valid under both offsets.

    Attributes:
        transition: The transition instant, normalised to UTC.
        offset_before: Offset in effect immediately before the transition.
        offset_after: Offset in effect from the transition onwards.
    """

    model_config = {"frozen": True}

    transition: datetime
    offset_before: timedelta
    offset_after: timedelta

    @field_validator("transition")
    @classmethod
    def _transition_is_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            msg = "transition instant must be timezone-aware"
            raise ValueError(msg)
        return value.astimezone(timezone.utc)

    @field_validator("offset_before", "offset_after")
    @classmethod
    def _offsets_in_range(cls, value: timedelta) -> timedelta:
        return _check_offset(value)

    @model_validator(mode="after")
    def _offsets_differ(self) -> Discontinuity:
        if self.offset_before == self.offset_after:
            msg = f"offsets before and after a transition must differ, both are {self.offset_before}"
            raise ValueError(msg)
        return self

    @classmethod
    def at_local(
        cls,
        local: datetime,
        offset_before: timedelta,
        offset_after: timedelta,
    ) -> Discontinuity:
        """Build a discontinuity from the local time of the transition.

        *local* is read under *offset_before*, e.g. ``01:00`` for a
        spring-forward from ``+01:00`` to ``+02:00``.
        """
        instant = (local - offset_before).replace(tzinfo=timezone.utc)
        return cls(transition=instant, offset_before=offset_before, offset_after=offset_after)

    @property
    def size(self) -> timedelta:
        """Width of the discontinuity; positive for a gap, negative for an overlap."""
        return self.offset_after - self.offset_before

    @property
    def kind(self) -> DiscontinuityKind:
        return DiscontinuityKind.GAP if self.size > timedelta(0) else DiscontinuityKind.OVERLAP

    @property
    def is_gap(self) -> bool:
        return self.kind is DiscontinuityKind.GAP

    @property
    def is_overlap(self) -> bool:
        return self.kind is DiscontinuityKind.OVERLAP

    @property
    def local_before(self) -> datetime:
        """The transition instant read on the wall clock under the before-offset."""
        return self.transition.replace(tzinfo=None) + self.offset_before

    @property
    def local_after(self) -> datetime:
        """The transition instant read on the wall clock under the after-offset."""
        return self.transition.replace(tzinfo=None) + self.offset_after

    @property
    def transition_after(self) -> OffsetDateTime:
        """The first valid local date-time after the transition."""
        return OffsetDateTime.from_instant(self.transition, self.offset_after)

    def is_valid_offset(self, offset: timedelta) -> bool:
        """Check whether *offset* is one of the two offsets bracketing the transition."""
        return offset in (self.offset_before, self.offset_after)

    def contains(self, local: datetime) -> bool:
        """Check whether *local* falls inside this gap or overlap."""
        if self.is_gap:
            return self.local_before <= local < self.local_after
        return self.local_after <= local < self.local_before

    def __str__(self) -> str:
        label = "Gap" if self.is_gap else "Overlap"
        start = OffsetDateTime.from_instant(self.transition, self.offset_before)
        return f"{label}[{start} to {format_offset(self.offset_after)}]"
