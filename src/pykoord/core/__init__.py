"""Core data model for pykoord."""

from pykoord.core.crs import CoordinateReferenceSystem
from pykoord.core.datum import DATUMS, Datum
from pykoord.core.ellipsoid import ELLIPSOIDS, Ellipsoid
from pykoord.core.projection import PROJECTIONS, Projection, ProjectionDef
from pykoord.core.units import PRIME_MERIDIANS, UNITS, PrimeMeridian, Unit

__all__ = [
    "CoordinateReferenceSystem",
    "Datum",
    "Ellipsoid",
    "Projection",
    "ProjectionDef",
    "PrimeMeridian",
    "Unit",
    "DATUMS",
    "ELLIPSOIDS",
    "PROJECTIONS",
    "PRIME_MERIDIANS",
    "UNITS",
]
