"""In-memory name resolver."""

from __future__ import annotations

from typing import Mapping

from pykoord.resolvers.base import NameResolver, split_name


class MappingResolver(NameResolver):
    """Resolve names from a dict of "authority:code" → parameter string.

    Keys are normalized with split_name(), so "3005" and "EPSG:3005"
    find the same entry; the authority part is matched case-insensitively.

    Examples:
        >>> r = MappingResolver({"EPSG:4326": "+proj=longlat +datum=WGS84"})
        >>> r.lookup("4326")
        '+proj=longlat +datum=WGS84'
    """

    def __init__(self, mapping: Mapping[str, str] | None = None) -> None:
        self._entries: dict[tuple[str, str], str] = {}
        for name, params in (mapping or {}).items():
            self.add(name, params)

    @staticmethod
    def _key(name: str) -> tuple[str, str]:
        authority, code = split_name(name)
        return authority.upper(), code

    def add(self, name: str, params: str) -> None:
        """Add or replace a definition."""
        self._entries[self._key(name)] = params

    def lookup(self, name: str) -> str | None:
        return self._entries.get(self._key(name))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MappingResolver({len(self._entries)} entries)"
