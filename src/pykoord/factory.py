"""CRS factory — the three ways of creating a CoordinateReferenceSystem."""

from __future__ import annotations

import logging
from typing import Sequence

from pykoord.core.crs import CoordinateReferenceSystem
from pykoord.errors import UnknownAuthorityCode
from pykoord.parsers import esri, proj4
from pykoord.parsers.splitter import split_parameters
from pykoord.registry import ParameterRegistry
from pykoord.resolvers.base import NameResolver
from pykoord.resolvers.chain import default_resolver

logger = logging.getLogger(__name__)


class CRSFactory:
    """Creates CoordinateReferenceSystems from names, PROJ.4 strings or Esri strings.

    Each factory owns one ParameterRegistry for its whole lifetime and
    hands that same instance to every parse, so definitions registered
    through ``registry`` are visible to all later calls. Parses hold the
    registry lock, so one factory can be shared between threads.

    Names have the form "authority:code" (e.g. "EPSG:3005"). Supported
    authorities depend on the resolver; the default one knows EPSG, ESRI,
    WORLD, NAD83 and NAD27 from the bundled init files and falls back to
    the PROJ database. A bare code is looked up in EPSG.

    Args:
        resolver: Name resolver for create_from_name(). Defaults to
                  resolvers.default_resolver().

    Examples:
        >>> factory = CRSFactory()
        >>> crs = factory.create_from_parameters(
        ...     None,
        ...     "+proj=aea +lat_1=50 +lat_2=58.5 +lat_0=45 +lon_0=-126 "
        ...     "+x_0=1000000 +y_0=0 +ellps=GRS80 +units=m",
        ... )
        >>> crs.projection.code
        'aea'
    """

    def __init__(self, resolver: NameResolver | None = None) -> None:
        self._resolver = resolver if resolver is not None else default_resolver()
        self._registry = ParameterRegistry()

    @property
    def registry(self) -> ParameterRegistry:
        """The factory's registry (shared, not a copy)."""
        return self._registry

    def get_registry(self) -> ParameterRegistry:
        return self._registry

    @property
    def resolver(self) -> NameResolver:
        return self._resolver

    def create_from_name(self, name: str) -> CoordinateReferenceSystem | None:
        """Create a CRS from a well-known name such as "EPSG:3005".

        Args:
            name: CRS name with optional authority prefix.

        Returns:
            The CRS, or None if the name maps to an empty definition.

        Raises:
            UnknownAuthorityCode: If the resolver has no definition.
            UnsupportedParameter: If a parameter is not supported.
            InvalidValue: If a parameter value is invalid.
        """
        params = self._resolver.lookup(name)
        if params is None:
            raise UnknownAuthorityCode(name)
        logger.debug("Resolved %s -> %s", name, params)
        return self.create_from_parameters(name, split_parameters(params))

    def create_from_parameters(
        self,
        name: str | None,
        params: str | Sequence[str] | None,
    ) -> CoordinateReferenceSystem | None:
        """Create a CRS from PROJ.4 parameters.

        Args:
            name: Name for the CRS, or None for an anonymous CRS.
            params: A parameter string such as
                "+proj=utm +zone=32 +datum=WGS84", or its tokens.

        Returns:
            The CRS, or None when no parameters were given.

        Raises:
            UnsupportedParameter: If a parameter is not supported.
            InvalidValue: If a parameter value is invalid.
        """
        if isinstance(params, str):
            params = split_parameters(params)
        if not params:
            return None
        with self._registry.lock:
            return proj4.parse(self._registry, name, params)

    def create_from_esri_string(self, esri_string: str) -> CoordinateReferenceSystem:
        """Create a CRS from an Esri projection string (.prj contents).

        Raises:
            MalformedSyntax: If the text cannot be read.
            UnsupportedParameter: For unknown projections or parameters.
            InvalidValue: If a value is invalid.
        """
        with self._registry.lock:
            return esri.parse_esri(self._registry, esri_string)

    def __repr__(self) -> str:
        return f"CRSFactory(resolver={self._resolver!r})"
