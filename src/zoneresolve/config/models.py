"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, zoneresolve.toml only contains
overrides. An empty file yields strict resolution for both gaps and overlaps.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from zoneresolve.domain.types import ResolverKind
from zoneresolve.errors import UnknownResolverError
from zoneresolve.resolvers.base import ZoneResolver
from zoneresolve.resolvers.factory import combination, resolver_for


class ResolverConfig(BaseModel):
    """[resolver] section."""

    model_config = {"frozen": True}

    gap: ResolverKind = ResolverKind.STRICT
    overlap: ResolverKind = ResolverKind.STRICT

    @field_validator("gap", "overlap", mode="before")
    @classmethod
    def _parse_kind(cls, value: object) -> ResolverKind:
        if value is None:
            return ResolverKind.STRICT
        try:
            return ResolverKind.parse(str(value))
        except ValueError:
            raise UnknownResolverError(str(value), [k.value for k in ResolverKind]) from None

    def build(self) -> ZoneResolver:
        """Return the resolver described by this section."""
        return combination(resolver_for(self.gap), resolver_for(self.overlap))
