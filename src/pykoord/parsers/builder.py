"""CRS builder — validated key/value parameters to a CoordinateReferenceSystem.

Shared by the PROJ.4 and Esri parsers: both reduce their input to a
PROJ.4 parameter map and hand it to build_crs() together with the
registry the names are resolved against.
"""

from __future__ import annotations

import math
from typing import Mapping, Sequence

from pykoord.core.crs import CoordinateReferenceSystem
from pykoord.core.datum import Datum
from pykoord.core.ellipsoid import Ellipsoid
from pykoord.core.projection import Projection
from pykoord.core.units import GREENWICH, PrimeMeridian, Unit
from pykoord.errors import InvalidValue, UnsupportedParameter
from pykoord.parsers.angles import parse_angle
from pykoord.registry import ParameterRegistry

Params = Mapping[str, "str | None"]

_SHAPE_KEYS = ("b", "rf", "f", "es")
_AXIS_PAIRS = ("ew", "ns", "ud")


def create_parameter_map(tokens: Sequence[str]) -> dict[str, str | None]:
    """Turn "+key=value" / "+flag" tokens into a dict (later keys win)."""
    params: dict[str, str | None] = {}
    for token in tokens:
        if token.startswith("+"):
            token = token[1:]
        key, sep, value = token.partition("=")
        params[key] = value if sep else None
    return params


# ── Value helpers ───────────────────────────────────────────────────


def _required(params: Params, key: str) -> str:
    value = params[key]
    if value is None or value == "":
        raise InvalidValue(key, value, "a value is required")
    return value


def _number(params: Params, key: str) -> float | None:
    if key not in params:
        return None
    text = _required(params, key)
    try:
        value = float(text)
    except ValueError:
        raise InvalidValue(key, text, "not a number") from None
    if not math.isfinite(value):
        raise InvalidValue(key, text, "must be finite")
    return value


def _positive(params: Params, key: str) -> float | None:
    value = _number(params, key)
    if value is not None and value <= 0:
        raise InvalidValue(key, params[key], "must be positive")
    return value


def _angle(params: Params, key: str, limit: float) -> float | None:
    if key not in params:
        return None
    text = _required(params, key)
    value = parse_angle(key, text)
    if not -limit <= value <= limit:
        raise InvalidValue(key, text, f"must be within [-{limit:g}, {limit:g}] degrees")
    return value


def _latitude(params: Params, key: str) -> float | None:
    return _angle(params, key, 90.0)


def _longitude(params: Params, key: str) -> float | None:
    return _angle(params, key, 360.0)


# ── Ellipsoid & datum ───────────────────────────────────────────────


def _parse_ellipsoid(registry: ParameterRegistry, params: Params) -> Ellipsoid | None:
    """Ellipsoid from +ellps, +R or +a with +b/+rf/+f/+es (None if not given)."""
    ellipsoid = None
    if "ellps" in params:
        code = _required(params, "ellps")
        ellipsoid = registry.get_ellipsoid(code)
        if ellipsoid is None:
            raise InvalidValue("ellps", code, "unknown ellipsoid")

    radius = _positive(params, "R")
    if radius is not None:
        return Ellipsoid.sphere("", radius)

    a = _positive(params, "a")
    shape_key = next((k for k in _SHAPE_KEYS if k in params), None)
    if a is None and shape_key is None:
        return ellipsoid
    if a is None:
        if ellipsoid is None:
            raise InvalidValue(shape_key, params[shape_key], "requires +a or +ellps")
        a = ellipsoid.a

    if shape_key == "b":
        b = _positive(params, "b")
        if b > a:
            raise InvalidValue("b", params["b"], "semi-minor axis exceeds semi-major axis")
    elif shape_key == "rf":
        rf = _number(params, "rf")
        if rf <= 1.0:
            raise InvalidValue("rf", params["rf"], "must be greater than 1")
        b = a * (1.0 - 1.0 / rf)
    elif shape_key == "f":
        f = _number(params, "f")
        if not 0.0 <= f < 1.0:
            raise InvalidValue("f", params["f"], "flattening must be within [0, 1)")
        b = a * (1.0 - f)
    elif shape_key == "es":
        es = _number(params, "es")
        if not 0.0 <= es < 1.0:
            raise InvalidValue("es", params["es"], "eccentricity squared must be within [0, 1)")
        b = a * math.sqrt(1.0 - es)
    elif ellipsoid is not None:
        b = a * (1.0 - ellipsoid.f)
    else:
        b = a
    return Ellipsoid("", a, b)


def _parse_towgs84(params: Params) -> tuple[float, ...] | None:
    if "towgs84" not in params:
        return None
    text = _required(params, "towgs84")
    try:
        values = tuple(float(v) for v in text.split(","))
    except ValueError:
        raise InvalidValue("towgs84", text, "not a list of numbers") from None
    if len(values) not in (3, 7):
        raise InvalidValue("towgs84", text, "expected 3 or 7 comma-separated numbers")
    return values


def _parse_datum(registry: ParameterRegistry, params: Params) -> Datum:
    datum = None
    if "datum" in params:
        code = _required(params, "datum")
        datum = registry.get_datum(code)
        if datum is None:
            raise InvalidValue("datum", code, "unknown datum")

    ellipsoid = _parse_ellipsoid(registry, params)
    towgs84 = _parse_towgs84(params)
    nadgrids = _required(params, "nadgrids") if "nadgrids" in params else None

    if ellipsoid is None and towgs84 is None and nadgrids is None and "R_A" not in params:
        if datum is not None:
            return datum
        default = registry.get_datum("WGS84")
        if default is not None:
            return default

    if ellipsoid is None:
        ellipsoid = datum.ellipsoid if datum is not None else registry.get_ellipsoid("WGS84")
        if ellipsoid is None:
            raise InvalidValue("ellps", None, "no ellipsoid given and WGS84 is not registered")

    if "R_A" in params:
        ellipsoid = Ellipsoid.sphere("", ellipsoid.authalic_radius)

    if datum is not None and ellipsoid == datum.ellipsoid:
        if towgs84 is None and nadgrids is None:
            return datum
        towgs84 = towgs84 if towgs84 is not None or nadgrids else datum.towgs84
    return Datum("", ellipsoid, towgs84, nadgrids)


# ── Projection ──────────────────────────────────────────────────────


def _parse_projection(registry: ParameterRegistry, params: Params) -> Projection:
    if "proj" not in params:
        raise InvalidValue("proj", None, "no projection given")
    code = _required(params, "proj")
    method = registry.get_projection(code)
    if method is None:
        raise UnsupportedParameter("proj", code)

    if method.geographic:
        return Projection(method)

    k_0 = _positive(params, "k_0")
    if k_0 is None:
        k_0 = _positive(params, "k")

    zone = None
    if "zone" in params:
        text = _required(params, "zone")
        try:
            zone = int(text)
        except ValueError:
            raise InvalidValue("zone", text, "not an integer") from None
        if not 1 <= zone <= 60:
            raise InvalidValue("zone", text, "must be within 1..60")

    lon_0 = _longitude(params, "lon_0")
    south = "south" in params

    if code == "utm":
        if zone is None:
            zone = int((((lon_0 or 0.0) + 180.0) % 360.0) / 6.0) + 1
        return Projection(
            method,
            lon_0=(zone - 1) * 6.0 - 180.0 + 3.0,
            k_0=0.9996,
            x_0=500000.0,
            y_0=10000000.0 if south else 0.0,
            zone=zone,
            south=south,
        )

    return Projection(
        method,
        lat_0=_latitude(params, "lat_0") or 0.0,
        lon_0=lon_0 or 0.0,
        lat_1=_latitude(params, "lat_1"),
        lat_2=_latitude(params, "lat_2"),
        lat_ts=_latitude(params, "lat_ts"),
        lonc=_longitude(params, "lonc"),
        alpha=_longitude(params, "alpha"),
        gamma=_longitude(params, "gamma"),
        k_0=1.0 if k_0 is None else k_0,
        x_0=_number(params, "x_0") or 0.0,
        y_0=_number(params, "y_0") or 0.0,
        h=_positive(params, "h"),
        zone=zone,
        south=south,
    )


# ── Units, prime meridian, axis ─────────────────────────────────────


def _parse_to_meter(params: Params) -> float | None:
    if "to_meter" not in params:
        return None
    text = _required(params, "to_meter")
    num, sep, den = text.partition("/")
    try:
        value = float(num) / float(den) if sep else float(num)
    except (ValueError, ZeroDivisionError):
        raise InvalidValue("to_meter", text, "not a number or fraction") from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidValue("to_meter", text, "must be positive")
    return value


def _parse_units(registry: ParameterRegistry, params: Params) -> tuple[Unit | None, float]:
    unit = None
    if "units" in params:
        code = _required(params, "units")
        unit = registry.get_unit(code)
        if unit is None:
            raise InvalidValue("units", code, "unknown unit")

    to_meter = _parse_to_meter(params)
    if to_meter is None:
        if unit is None:
            unit = registry.get_unit("m")
        return unit, unit.to_meter if unit is not None else 1.0
    if unit is not None and not math.isclose(unit.to_meter, to_meter, rel_tol=1e-9):
        unit = None
    return unit, to_meter


def _parse_prime_meridian(registry: ParameterRegistry, params: Params) -> PrimeMeridian:
    if "pm" not in params:
        return GREENWICH
    text = _required(params, "pm")
    pm = registry.get_prime_meridian(text)
    if pm is not None:
        return pm
    try:
        longitude = parse_angle("pm", text)
    except InvalidValue:
        raise InvalidValue("pm", text, "unknown prime meridian") from None
    if not -180.0 <= longitude <= 180.0:
        raise InvalidValue("pm", text, "must be within [-180, 180] degrees")
    return PrimeMeridian("", longitude)


def _parse_axis(params: Params) -> str:
    if "axis" not in params:
        return "enu"
    text = _required(params, "axis")
    if len(text) != 3 or any(sum(c in pair for c in text) != 1 for pair in _AXIS_PAIRS):
        raise InvalidValue("axis", text, "expected one of each of e/w, n/s, u/d")
    return text


def build_crs(
    registry: ParameterRegistry,
    name: str | None,
    params: Params,
    tokens: Sequence[str],
) -> CoordinateReferenceSystem:
    """Build a CRS from a PROJ.4 parameter map.

    Args:
        registry: Registry used to resolve projection, ellipsoid, datum,
                  unit and prime meridian names.
        name: CRS name, or None for an anonymous CRS.
        params: Parameter map from create_parameter_map().
        tokens: Original tokens, stored on the CRS.

    Returns:
        The constructed CoordinateReferenceSystem.

    Raises:
        UnsupportedParameter: If the projection method is not registered.
        InvalidValue: If a value fails validation.
    """
    projection = _parse_projection(registry, params)
    datum = _parse_datum(registry, params)
    prime_meridian = _parse_prime_meridian(registry, params)
    axis = _parse_axis(params)

    if projection.is_geographic:
        units, to_meter = None, 1.0
    else:
        units, to_meter = _parse_units(registry, params)

    return CoordinateReferenceSystem(
        name=name,
        parameters=tuple(tokens),
        datum=datum,
        projection=projection,
        units=units,
        to_meter=to_meter,
        prime_meridian=prime_meridian,
        axis=axis,
    )
