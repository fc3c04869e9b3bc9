"""Exception hierarchy and structured error payloads.

Every exception raised by zoneresolve derives from :class:`ZoneResolveError`
and carries a stable ``code`` plus a ``detail`` dict, so callers can turn a
failure into an :class:`ErrorInfo` without parsing the message.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from pydantic import BaseModel, Field

from zoneresolve.domain.values import format_offset, zone_name


class ErrorInfo(BaseModel):
    """Structured error payload built from a :class:`ZoneResolveError`."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ZoneResolveError(Exception):
    """Root of all zoneresolve exceptions."""

    code = "ZONERESOLVE_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail

    def to_error(self) -> ErrorInfo:
        return ErrorInfo(code=self.code, message=self.message, detail=self.detail)

    def _init_args(self) -> tuple[Any, ...]:
        """Positional arguments that rebuild this exception via ``__init__``."""
        return (self.message,)

    def __reduce__(self) -> tuple[Any, ...]:
        # pickle and copy call type(self)(*args); subclasses take structured args.
        return type(self), self._init_args(), self.__dict__


class ResolutionError(ZoneResolveError):
    """A resolver rejected a gap or overlap."""

    code = "RESOLUTION_ERROR"


class GapUnresolvableError(ResolutionError):
    """The local date-time does not exist in the zone."""

    code = "GAP_UNRESOLVABLE"

    def __init__(self, local: datetime, zone: Any) -> None:
        self.local = local
        self.zone = zone
        super().__init__(
            f"Local time {local.isoformat()} does not exist in time zone "
            f"{zone_name(zone)} due to a gap in the local time-line",
            local=local.isoformat(),
            zone=zone_name(zone),
        )

    def _init_args(self) -> tuple[Any, ...]:
        return (self.local, self.zone)


class OverlapUnresolvableError(ResolutionError):
    """The local date-time occurs twice in the zone."""

    code = "OVERLAP_UNRESOLVABLE"

    def __init__(
        self,
        local: datetime,
        zone: Any,
        offset_before: timedelta,
        offset_after: timedelta,
    ) -> None:
        self.local = local
        self.zone = zone
        self.offset_before = offset_before
        self.offset_after = offset_after
        super().__init__(
            f"Local time {local.isoformat()} has two matching offsets, "
            f"{format_offset(offset_before)} and {format_offset(offset_after)}, "
            f"in time zone {zone_name(zone)}",
            local=local.isoformat(),
            zone=zone_name(zone),
            offset_before=format_offset(offset_before),
            offset_after=format_offset(offset_after),
        )

    def _init_args(self) -> tuple[Any, ...]:
        return (self.local, self.zone, self.offset_before, self.offset_after)


class UnknownResolverError(ZoneResolveError, ValueError):
    """No built-in resolver has the requested name."""

    code = "UNKNOWN_RESOLVER"

    def __init__(self, name: str, choices: list[str]) -> None:
        self.name = name
        super().__init__(
            f"Unknown resolver {name!r}; expected one of: {', '.join(choices)}",
            name=name,
            choices=choices,
        )

    def _init_args(self) -> tuple[Any, ...]:
        return (self.name, self.detail["choices"])


class ConfigError(ZoneResolveError):
    """The configuration file could not be read."""

    code = "INVALID_CONFIG"
