"""Shared pytest fixtures and test helpers for zoneresolve tests."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from zoneresolve.domain.values import Discontinuity, OffsetDateTime

PLUS_ONE = timedelta(hours=1)
PLUS_TWO = timedelta(hours=2)
ZONE = "Europe/Paris"


@pytest.fixture
def zone() -> str:
    """Zone identity used in diagnostics."""
    return ZONE


@pytest.fixture
def gap() -> Discontinuity:
    """Spring-forward gap: 01:00 at +01:00 jumps to 02:00 at +02:00."""
    return Discontinuity.at_local(datetime(2024, 3, 31, 1, 0), PLUS_ONE, PLUS_TWO)


@pytest.fixture
def overlap() -> Discontinuity:
    """Fall-back overlap: 02:00 at +02:00 falls back to 01:00 at +01:00."""
    return Discontinuity.at_local(datetime(2024, 10, 27, 2, 0), PLUS_TWO, PLUS_ONE)


@pytest.fixture
def gap_local() -> datetime:
    """A local time inside the gap fixture."""
    return datetime(2024, 3, 31, 1, 30)


@pytest.fixture
def overlap_local() -> datetime:
    """A local time inside the overlap fixture."""
    return datetime(2024, 10, 27, 1, 30)


def odt(local: datetime, hours: int) -> OffsetDateTime:
    """Build an OffsetDateTime with a whole-hour offset."""
    return OffsetDateTime.of(local, timedelta(hours=hours))
