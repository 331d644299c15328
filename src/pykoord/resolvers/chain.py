"""Resolver chaining and the default resolver."""

from __future__ import annotations

from pykoord.resolvers.base import NameResolver
from pykoord.resolvers.database import PyprojResolver
from pykoord.resolvers.initfile import InitFileResolver


class ChainResolver(NameResolver):
    """Ask several resolvers in turn; the first non-None answer wins."""

    def __init__(self, *resolvers: NameResolver) -> None:
        self.resolvers: list[NameResolver] = list(resolvers)

    def lookup(self, name: str) -> str | None:
        for resolver in self.resolvers:
            params = resolver.lookup(name)
            if params is not None:
                return params
        return None

    def __repr__(self) -> str:
        inner = ", ".join(repr(r) for r in self.resolvers)
        return f"ChainResolver({inner})"


def default_resolver() -> NameResolver:
    """Bundled init files first, then the PROJ database."""
    return ChainResolver(InitFileResolver(), PyprojResolver())
