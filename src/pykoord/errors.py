"""Error taxonomy for CRS resolution and construction.

Callers can tell three situations apart:

- ``UnknownAuthorityCode`` — the name does not exist in any namespace the
  resolver knows (fix the identifier).
- ``UnsupportedParameter`` / ``InvalidValue`` — the parameters are broken
  (fix the parameter string).
- ``MalformedSyntax`` — an Esri string could not be read at all.

"No parameters available" is not an error; the factory returns ``None``.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "KoordError",
    "UnknownAuthorityCode",
    "ParseError",
    "UnsupportedParameter",
    "InvalidValue",
    "MalformedSyntax",
    "RegistryConflict",
]


class KoordError(Exception):
    """Base class for all pykoord errors."""


class UnknownAuthorityCode(KoordError, LookupError):
    """No parameter definition is known for a CRS name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown authority code: '{name}'")


class ParseError(KoordError, ValueError):
    """A parameter set or Esri string could not be turned into a CRS."""


class UnsupportedParameter(ParseError):
    """A parameter (or projection method) is not implemented."""

    def __init__(self, key: str, value: str | None = None) -> None:
        self.key = key
        self.value = value
        if value is None:
            msg = f"Unsupported parameter: '{key}'"
        else:
            msg = f"Unsupported parameter: '{key}={value}'"
        super().__init__(msg)


class InvalidValue(ParseError):
    """A recognized parameter has a value that fails validation."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for '{key}' ({value!r}): {reason}")


class MalformedSyntax(ParseError):
    """Esri text that cannot be tokenized or whose brackets do not balance."""

    def __init__(self, reason: str, position: int | None = None) -> None:
        self.reason = reason
        self.position = position
        if position is None:
            msg = f"Malformed syntax: {reason}"
        else:
            msg = f"Malformed syntax at position {position}: {reason}"
        super().__init__(msg)


class RegistryConflict(KoordError, ValueError):
    """A registration would silently redefine an existing entry."""

    def __init__(self, kind: str, code: str) -> None:
        self.kind = kind
        self.code = code
        super().__init__(
            f"{kind} '{code}' is already registered with a different definition "
            f"(pass replace=True to override)"
        )
