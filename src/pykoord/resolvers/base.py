"""Base class for name resolvers."""

from __future__ import annotations

from abc import ABC, abstractmethod

DEFAULT_AUTHORITY = "EPSG"

# Namespaces with bundled init files
AUTHORITIES = ("EPSG", "ESRI", "WORLD", "NAD83", "NAD27")


def split_name(name: str) -> tuple[str, str]:
    """Split "authority:code" into its parts (authority defaults to EPSG).

    Examples:
        >>> split_name("EPSG:3005")
        ('EPSG', '3005')
        >>> split_name("3005")
        ('EPSG', '3005')
    """
    authority, sep, code = name.partition(":")
    if not sep:
        return DEFAULT_AUTHORITY, name
    return authority, code


class NameResolver(ABC):
    """Maps a CRS name to a raw PROJ.4 parameter string.

    An unknown name is a normal outcome and yields None; turning it into
    an error is the caller's decision.
    """

    @abstractmethod
    def lookup(self, name: str) -> str | None:
        """Return the parameter string for a name, or None if unknown.

        Args:
            name: CRS name, "authority:code" or bare "code".
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
