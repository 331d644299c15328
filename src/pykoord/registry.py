"""Parameter registry — named definitions the parsers resolve against."""

from __future__ import annotations

import logging
import threading
from typing import TypeVar

from pykoord.core.datum import DATUMS, Datum
from pykoord.core.ellipsoid import ELLIPSOIDS, Ellipsoid
from pykoord.core.projection import PROJECTIONS, ProjectionDef
from pykoord.core.units import PRIME_MERIDIANS, UNITS, PrimeMeridian, Unit
from pykoord.errors import RegistryConflict

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ParameterRegistry:
    """Registry of projections, ellipsoids, datums, units and prime meridians.

    A new registry starts with the built-in PROJ tables. Callers may add
    their own definitions before parsing; a parameter set can then refer
    to them by code (e.g. ``+ellps=my_ellps``).

    Re-registering an identical definition is a no-op. Registering a
    different definition under an existing code raises RegistryConflict
    unless ``replace=True`` is passed.

    All registrations hold ``lock``; CRSFactory holds the same lock for
    the duration of every parse.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._projections: dict[str, ProjectionDef] = dict(PROJECTIONS)
        self._ellipsoids: dict[str, Ellipsoid] = dict(ELLIPSOIDS)
        self._datums: dict[str, Datum] = dict(DATUMS)
        self._units: dict[str, Unit] = dict(UNITS)
        self._prime_meridians: dict[str, PrimeMeridian] = dict(PRIME_MERIDIANS)

    def _register(
        self, table: dict[str, T], kind: str, code: str, item: T, replace: bool
    ) -> None:
        if not code:
            raise ValueError(f"Cannot register {kind.lower()} without a code")
        with self.lock:
            existing = table.get(code)
            if existing is not None and existing != item and not replace:
                raise RegistryConflict(kind, code)
            table[code] = item
        logger.debug("Registered %s '%s'", kind.lower(), code)

    def register_projection(self, proj: ProjectionDef, replace: bool = False) -> None:
        """Register a projection method under its code."""
        self._register(self._projections, "Projection", proj.code, proj, replace)

    def register_ellipsoid(self, ellipsoid: Ellipsoid, replace: bool = False) -> None:
        """Register an ellipsoid under its code."""
        self._register(self._ellipsoids, "Ellipsoid", ellipsoid.code, ellipsoid, replace)

    def register_datum(self, datum: Datum, replace: bool = False) -> None:
        """Register a datum under its code."""
        self._register(self._datums, "Datum", datum.code, datum, replace)

    def register_unit(self, unit: Unit, replace: bool = False) -> None:
        """Register a linear unit under its code."""
        self._register(self._units, "Unit", unit.code, unit, replace)

    def register_prime_meridian(self, pm: PrimeMeridian, replace: bool = False) -> None:
        """Register a prime meridian under its code."""
        self._register(self._prime_meridians, "Prime meridian", pm.code, pm, replace)

    def get_projection(self, code: str) -> ProjectionDef | None:
        return self._projections.get(code)

    def get_ellipsoid(self, code: str) -> Ellipsoid | None:
        return self._ellipsoids.get(code)

    def get_datum(self, code: str) -> Datum | None:
        return self._datums.get(code)

    def get_unit(self, code: str) -> Unit | None:
        return self._units.get(code)

    def get_prime_meridian(self, code: str) -> PrimeMeridian | None:
        return self._prime_meridians.get(code)

    def find_unit(self, to_meter: float, rel_tol: float = 1e-9) -> Unit | None:
        """Find a registered unit by its length in meters."""
        for unit in self._units.values():
            if abs(unit.to_meter - to_meter) <= rel_tol * max(1.0, abs(to_meter)):
                return unit
        return None

    @property
    def available_projections(self) -> list[str]:
        """List of registered projection codes."""
        return list(self._projections.keys())

    @property
    def available_ellipsoids(self) -> list[str]:
        return list(self._ellipsoids.keys())

    @property
    def available_datums(self) -> list[str]:
        return list(self._datums.keys())

    @property
    def available_units(self) -> list[str]:
        return list(self._units.keys())

    def __repr__(self) -> str:
        return (
            f"ParameterRegistry({len(self._projections)} projections, "
            f"{len(self._ellipsoids)} ellipsoids, {len(self._datums)} datums)"
        )
