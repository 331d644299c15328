"""Esri projection string parser (the WKT dialect found in .prj files).

Example input:
    PROJCS["NAD_1983_BC_Environment_Albers",
        GEOGCS["GCS_North_American_1983",
            DATUM["D_North_American_1983",SPHEROID["GRS_1980",6378137.0,298.257222101]],
            PRIMEM["Greenwich",0.0],UNIT["Degree",0.0174532925199433]],
        PROJECTION["Albers"],
        PARAMETER["False_Easting",1000000.0],PARAMETER["False_Northing",0.0],
        PARAMETER["Central_Meridian",-126.0],PARAMETER["Standard_Parallel_1",50.0],
        PARAMETER["Standard_Parallel_2",58.5],PARAMETER["Latitude_Of_Origin",45.0],
        UNIT["Meter",1.0]]

The text is read into a tree of WktNode objects, which is then translated
into PROJ.4 tokens and built through the same path as PROJ.4 strings.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterator

from pykoord.core.crs import CoordinateReferenceSystem, format_number
from pykoord.errors import InvalidValue, MalformedSyntax, UnsupportedParameter
from pykoord.parsers.builder import build_crs, create_parameter_map
from pykoord.registry import ParameterRegistry

logger = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile(
    r"(?P<space>\s+)"
    r"|(?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
    r"|(?P<ident>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<string>\"(?:[^\"]|\"\")*\")"
    r"|(?P<open>[\[(])"
    r"|(?P<close>[\])])"
    r"|(?P<comma>,)"
)

_CLOSING = {"[": "]", "(": ")"}

# Esri projection names → PROJ methods
_ESRI_PROJECTIONS: dict[str, str] = {
    "albers": "aea",
    "albers_conic_equal_area": "aea",
    "azimuthal_equidistant": "aeqd",
    "cassini": "cass",
    "cassini_soldner": "cass",
    "cylindrical_equal_area": "cea",
    "equidistant_cylindrical": "eqc",
    "plate_carree": "eqc",
    "equidistant_conic": "eqdc",
    "gnomonic": "gnom",
    "krovak": "krovak",
    "lambert_azimuthal_equal_area": "laea",
    "lambert_conformal_conic": "lcc",
    "lambert_conformal_conic_1sp": "lcc",
    "lambert_conformal_conic_2sp": "lcc",
    "mercator": "merc",
    "mercator_1sp": "merc",
    "miller_cylindrical": "mill",
    "mollweide": "moll",
    "new_zealand_map_grid": "nzmg",
    "hotine_oblique_mercator_azimuth_center": "omerc",
    "hotine_oblique_mercator": "omerc",
    "orthographic": "ortho",
    "polyconic": "poly",
    "robinson": "robin",
    "sinusoidal": "sinu",
    "stereographic": "stere",
    "polar_stereographic": "stere",
    "double_stereographic": "sterea",
    "oblique_stereographic": "sterea",
    "transverse_mercator": "tmerc",
    "gauss_kruger": "tmerc",
    "van_der_grinten_i": "vandg",
}

# Esri parameter names → PROJ keys (None = accepted and ignored)
_ESRI_PARAMETERS: dict[str, str | None] = {
    "false_easting": "x_0",
    "false_northing": "y_0",
    "central_meridian": "lon_0",
    "longitude_of_origin": "lon_0",
    "longitude_of_center": "lon_0",
    "latitude_of_origin": "lat_0",
    "latitude_of_center": "lat_0",
    "standard_parallel_1": "lat_1",
    "standard_parallel_2": "lat_2",
    "scale_factor": "k_0",
    "azimuth": "alpha",
    "rectified_grid_angle": "gamma",
    "height": "h",
    "auxiliary_sphere_type": None,
}

# Per-method overrides of _ESRI_PARAMETERS
_METHOD_PARAMETERS: dict[str, dict[str, str]] = {
    "merc": {"standard_parallel_1": "lat_ts"},
    "stere": {"standard_parallel_1": "lat_ts"},
    "cea": {"standard_parallel_1": "lat_ts"},
    "eqc": {"standard_parallel_1": "lat_ts"},
    "omerc": {"longitude_of_center": "lonc"},
}

# Esri / OGC datum names (without "D_" prefix) → PROJ datum codes
_ESRI_DATUMS: dict[str, str] = {
    "wgs_1984": "WGS84",
    "north_american_1983": "NAD83",
    "north_american_datum_1983": "NAD83",
    "north_american_1927": "NAD27",
    "north_american_datum_1927": "NAD27",
    "ggrs_1987": "GGRS87",
    "greek_geodetic_reference_system_1987": "GGRS87",
    "deutsches_hauptdreiecksnetz": "potsdam",
    "potsdam": "potsdam",
    "carthage": "carthage",
    "hermannskogel": "hermannskogel",
    "ireland_1965": "ire65",
    "tm65": "ire65",
    "new_zealand_1949": "nzgd49",
    "new_zealand_geodetic_datum_1949": "nzgd49",
    "osgb_1936": "OSGB36",
}

# Esri spheroid names → PROJ ellipsoid codes
_ESRI_SPHEROIDS: dict[str, str] = {
    "grs_1980": "GRS80",
    "wgs_1984": "WGS84",
    "wgs_1972": "WGS72",
    "wgs_1966": "WGS66",
    "grs_1967": "GRS67",
    "clarke_1866": "clrk66",
    "clarke_1880": "clrk80",
    "clarke_1880_ign": "clrk80ign",
    "international_1924": "intl",
    "international_1909": "intl",
    "krasovsky_1940": "krass",
    "bessel_1841": "bessel",
    "airy_1830": "airy",
    "airy_modified": "mod_airy",
    "helmert_1906": "helmert",
    "everest_1830": "evrst30",
    "hough_1960": "hough",
    "australian": "aust_SA",
    "sphere": "sphere",
}

# Esri linear unit names → PROJ unit codes
_ESRI_UNITS: dict[str, str] = {
    "meter": "m",
    "metre": "m",
    "kilometer": "km",
    "foot": "ft",
    "foot_us": "us-ft",
    "us survey foot": "us-ft",
    "yard": "yd",
    "mile_us": "us-mi",
    "nautical_mile": "kmi",
}


@dataclass
class WktNode:
    """One KEYWORD[...] element. Args are str, float or nested WktNode."""

    keyword: str
    args: list[Any] = field(default_factory=list)
    position: int = 0

    @property
    def name(self) -> str | None:
        if self.args and isinstance(self.args[0], str):
            return self.args[0]
        return None

    def children(self, keyword: str) -> Iterator[WktNode]:
        keyword = keyword.upper()
        for arg in self.args:
            if isinstance(arg, WktNode) and arg.keyword.upper() == keyword:
                yield arg

    def child(self, keyword: str) -> WktNode | None:
        return next(self.children(keyword), None)


# ── Reading ─────────────────────────────────────────────────────────


def tokenize(text: str) -> list[tuple[str, str, int]]:
    """Split Esri text into (kind, text, position) tokens.

    Raises:
        MalformedSyntax: On a character that starts no token, or an
            unterminated string.
    """
    tokens: list[tuple[str, str, int]] = []
    pos = 0
    while pos < len(text):
        m = _TOKEN_PATTERN.match(text, pos)
        if not m:
            if text[pos] == '"':
                raise MalformedSyntax("unterminated string", pos)
            raise MalformedSyntax(f"unexpected character {text[pos]!r}", pos)
        kind = m.lastgroup
        if kind != "space":
            tokens.append((kind, m.group(), pos))
        pos = m.end()
    return tokens


class _Reader:
    """Recursive-descent reader over the token list."""

    def __init__(self, text: str) -> None:
        self._tokens = tokenize(text)
        self._index = 0
        self._end = len(text)

    def _peek(self) -> tuple[str, str, int] | None:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def _next(self, expected: str) -> tuple[str, str, int]:
        token = self._peek()
        if token is None:
            raise MalformedSyntax(f"unexpected end of input, expected {expected}", self._end)
        self._index += 1
        return token

    def read(self) -> WktNode:
        if not self._tokens:
            raise MalformedSyntax("empty input", 0)
        node = self._node()
        token = self._peek()
        if token is not None:
            if token[0] == "close":
                raise MalformedSyntax(f"unbalanced brackets: unexpected {token[1]!r}", token[2])
            raise MalformedSyntax(f"unexpected trailing text {token[1]!r}", token[2])
        return node

    def _node(self) -> WktNode:
        kind, keyword, pos = self._next("keyword")
        if kind != "ident":
            raise MalformedSyntax(f"expected keyword, got {keyword!r}", pos)
        kind, opening, open_pos = self._next("'['")
        if kind != "open":
            raise MalformedSyntax(f"expected '[' after {keyword}, got {opening!r}", open_pos)

        node = WktNode(keyword, position=pos)
        closing = _CLOSING[opening]
        token = self._peek()
        if token is not None and token[0] == "close":
            self._index += 1
            self._check_closing(token, closing, open_pos)
            return node

        while True:
            node.args.append(self._value())
            token = self._peek()
            if token is None:
                raise MalformedSyntax(
                    f"unbalanced brackets: missing {closing!r} for {keyword}", self._end
                )
            self._index += 1
            if token[0] == "comma":
                continue
            if token[0] == "close":
                self._check_closing(token, closing, open_pos)
                return node
            raise MalformedSyntax(f"expected ',' or {closing!r}, got {token[1]!r}", token[2])

    @staticmethod
    def _check_closing(token: tuple[str, str, int], closing: str, open_pos: int) -> None:
        if token[1] != closing:
            raise MalformedSyntax(
                f"unbalanced brackets: {token[1]!r} closes bracket opened at {open_pos}",
                token[2],
            )

    def _value(self) -> Any:
        token = self._peek()
        if token is None:
            raise MalformedSyntax("unexpected end of input, expected a value", self._end)
        kind, text, pos = token
        if kind == "string":
            self._index += 1
            return text[1:-1].replace('""', '"')
        if kind == "number":
            self._index += 1
            return float(text)
        if kind == "ident":
            following = self._tokens[self._index + 1] if self._index + 1 < len(self._tokens) else None
            if following is not None and following[0] == "open":
                return self._node()
            self._index += 1
            return text
        raise MalformedSyntax(f"expected a value, got {text!r}", pos)


def read_wkt(text: str) -> WktNode:
    """Read Esri text into its root WktNode."""
    return _Reader(text).read()


# ── Translation ─────────────────────────────────────────────────────


def _key(name: Any) -> str:
    return str(name).strip().lower()


def _numeric(node: WktNode, index: int, what: str) -> float:
    if index >= len(node.args):
        raise InvalidValue(node.keyword, None, f"missing {what}")
    value = node.args[index]
    if not isinstance(value, float):
        raise InvalidValue(node.keyword, value, f"{what} is not a number")
    return value


def _datum_tokens(registry: ParameterRegistry, geogcs: WktNode) -> list[str]:
    datum = geogcs.child("DATUM")
    if datum is None:
        raise InvalidValue("GEOGCS", geogcs.name, "missing DATUM")

    towgs84 = datum.child("TOWGS84")
    extra: list[str] = []
    if towgs84 is not None:
        values = [_numeric(towgs84, i, "shift value") for i in range(len(towgs84.args))]
        extra.append("+towgs84=" + ",".join(format_number(v) for v in values))

    datum_name = _key(datum.name or "")
    if datum_name.startswith("d_"):
        datum_name = datum_name[2:]
    code = _ESRI_DATUMS.get(datum_name)
    if code is not None and registry.get_datum(code) is not None and not extra:
        return [f"+datum={code}"]

    spheroid = datum.child("SPHEROID") or datum.child("ELLIPSOID")
    if spheroid is None:
        raise InvalidValue("DATUM", datum.name, "missing SPHEROID")
    a = _numeric(spheroid, 1, "semi-major axis")
    rf = _numeric(spheroid, 2, "inverse flattening")
    if a <= 0:
        raise InvalidValue("SPHEROID", a, "semi-major axis must be positive")
    if rf != 0 and rf <= 1:
        raise InvalidValue("SPHEROID", rf, "inverse flattening must be 0 or greater than 1")

    ellps = _ESRI_SPHEROIDS.get(_key(spheroid.name or ""))
    if ellps is not None and registry.get_ellipsoid(ellps) is not None:
        return [f"+ellps={ellps}"] + extra
    if rf == 0:
        return [f"+R={format_number(a)}"] + extra
    return [f"+a={format_number(a)}", f"+rf={format_number(rf)}"] + extra


def _prime_meridian_tokens(registry: ParameterRegistry, geogcs: WktNode) -> list[str]:
    primem = geogcs.child("PRIMEM")
    if primem is None:
        return []
    longitude = _numeric(primem, 1, "longitude")
    if longitude == 0.0:
        return []
    pm = registry.get_prime_meridian(_key(primem.name or ""))
    if pm is not None:
        return [f"+pm={pm.code}"]
    return [f"+pm={format_number(longitude)}"]


def _unit_factor(projcs: WktNode) -> float:
    """Meters per linear unit of a PROJCS (1.0 without a UNIT)."""
    unit = projcs.child("UNIT")
    if unit is None:
        return 1.0
    factor = _numeric(unit, 1, "conversion factor")
    if factor <= 0:
        raise InvalidValue("UNIT", factor, "conversion factor must be positive")
    return factor


def _unit_tokens(registry: ParameterRegistry, projcs: WktNode) -> list[str]:
    unit = projcs.child("UNIT")
    if unit is None:
        return ["+units=m"]
    factor = _unit_factor(projcs)
    code = _ESRI_UNITS.get(_key(unit.name or ""))
    if code is not None and registry.get_unit(code) is not None:
        return [f"+units={code}"]
    match = registry.find_unit(factor)
    if match is not None:
        return [f"+units={match.code}"]
    return [f"+to_meter={format_number(factor)}"]


def _projection_tokens(projcs: WktNode, to_meter: float) -> list[str]:
    """PROJ tokens for PROJECTION and PARAMETERs.

    Esri false easting/northing are in the CRS's linear unit, +x_0/+y_0
    are always meters.
    """
    projection = projcs.child("PROJECTION")
    if projection is None or projection.name is None:
        raise InvalidValue("PROJECTION", None, "missing projection")
    method = _ESRI_PROJECTIONS.get(_key(projection.name))
    if method is None:
        raise UnsupportedParameter("PROJECTION", projection.name)

    overrides = _METHOD_PARAMETERS.get(method, {})
    tokens = [f"+proj={method}"]
    for param in projcs.children("PARAMETER"):
        if param.name is None:
            raise InvalidValue("PARAMETER", None, "missing parameter name")
        name = _key(param.name)
        if name not in _ESRI_PARAMETERS:
            raise UnsupportedParameter(param.name)
        key = overrides.get(name, _ESRI_PARAMETERS[name])
        value = _numeric(param, 1, f"value of {param.name}")
        if key in ("x_0", "y_0"):
            value *= to_meter
        if key is not None:
            tokens.append(f"+{key}={format_number(value)}")
    return tokens


def esri_to_proj4(registry: ParameterRegistry, text: str) -> tuple[str | None, list[str]]:
    """Translate Esri text to a CRS name and equivalent PROJ.4 tokens.

    Raises:
        MalformedSyntax: If the text cannot be read.
        UnsupportedParameter: For unknown root elements, projections or
            parameters.
        InvalidValue: For missing or non-numeric values.
    """
    root = read_wkt(text)
    keyword = root.keyword.upper()

    if keyword == "GEOGCS":
        tokens = ["+proj=longlat"]
        tokens += _datum_tokens(registry, root)
        tokens += _prime_meridian_tokens(registry, root)
    elif keyword == "PROJCS":
        geogcs = root.child("GEOGCS")
        if geogcs is None:
            raise InvalidValue("PROJCS", root.name, "missing GEOGCS")
        tokens = _projection_tokens(root, _unit_factor(root))
        tokens += _datum_tokens(registry, geogcs)
        tokens += _prime_meridian_tokens(registry, geogcs)
        tokens += _unit_tokens(registry, root)
    else:
        raise UnsupportedParameter(root.keyword)

    tokens.append("+no_defs")
    return root.name, tokens


def parse_esri(registry: ParameterRegistry, text: str) -> CoordinateReferenceSystem:
    """Parse an Esri projection string into a CRS.

    The CRS name is taken from the PROJCS/GEOGCS element; its
    ``parameters`` hold the equivalent PROJ.4 tokens.
    """
    name, tokens = esri_to_proj4(registry, text)
    logger.debug("Esri %s translated to %s", name, " ".join(tokens))
    return build_crs(registry, name, create_parameter_map(tokens), tokens)
