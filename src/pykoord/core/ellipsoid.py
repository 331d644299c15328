"""Reference ellipsoids and the built-in ellipsoid table."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Ellipsoid:
    """Reference ellipsoid of revolution.

    Attributes:
        code: Short PROJ identifier (e.g. "GRS80"), or "" for an
              anonymous ellipsoid built from +a/+b style parameters.
        a: Semi-major axis in meters.
        b: Semi-minor axis in meters.
        name: Human readable name.
    """

    code: str
    a: float
    b: float
    name: str = ""

    @classmethod
    def from_flattening(cls, code: str, a: float, rf: float, name: str = "") -> Ellipsoid:
        """Build from semi-major axis and reciprocal flattening (rf=0 is a sphere)."""
        if rf == 0:
            return cls(code, a, a, name)
        return cls(code, a, a * (1.0 - 1.0 / rf), name)

    @classmethod
    def sphere(cls, code: str, radius: float, name: str = "") -> Ellipsoid:
        return cls(code, radius, radius, name)

    @property
    def f(self) -> float:
        """Flattening."""
        return (self.a - self.b) / self.a

    @property
    def rf(self) -> float:
        """Reciprocal flattening (0.0 for a sphere)."""
        f = self.f
        return 0.0 if f == 0 else 1.0 / f

    @property
    def es(self) -> float:
        """Eccentricity squared."""
        return 1.0 - (self.b * self.b) / (self.a * self.a)

    @property
    def is_sphere(self) -> bool:
        return self.a == self.b

    @property
    def authalic_radius(self) -> float:
        """Radius of the sphere with the same surface area."""
        es = self.es
        if es == 0:
            return self.a
        e = math.sqrt(es)
        q = (1.0 - es) * (1.0 / (1.0 - es) - math.log((1.0 - e) / (1.0 + e)) / (2.0 * e))
        return self.a * math.sqrt(q / 2.0)

    def __repr__(self) -> str:
        label = self.code or "anonymous"
        return f"Ellipsoid({label}, a={self.a:.3f}, rf={self.rf:.9f})"


def _rf(code: str, a: float, rf: float, name: str) -> Ellipsoid:
    return Ellipsoid.from_flattening(code, a, rf, name)


# Classic PROJ ellipsoid definitions
ELLIPSOIDS: dict[str, Ellipsoid] = {
    e.code: e
    for e in (
        _rf("MERIT", 6378137.0, 298.257, "MERIT 1983"),
        _rf("SGS85", 6378136.0, 298.257, "Soviet Geodetic System 85"),
        _rf("GRS80", 6378137.0, 298.257222101, "GRS 1980 (IUGG, 1980)"),
        _rf("IAU76", 6378140.0, 298.257, "IAU 1976"),
        Ellipsoid("airy", 6377563.396, 6356256.910, "Airy 1830"),
        _rf("APL4.9", 6378137.0, 298.25, "Appl. Physics. 1965"),
        _rf("NWL9D", 6378145.0, 298.25, "Naval Weapons Lab., 1965"),
        Ellipsoid("mod_airy", 6377340.189, 6356034.446, "Modified Airy"),
        _rf("andrae", 6377104.43, 300.0, "Andrae 1876 (Den., Iclnd.)"),
        _rf("aust_SA", 6378160.0, 298.25, "Australian Natl & S. Amer. 1969"),
        _rf("GRS67", 6378160.0, 298.2471674270, "GRS 67 (IUGG 1967)"),
        _rf("bessel", 6377397.155, 299.1528128, "Bessel 1841"),
        _rf("bess_nam", 6377483.865, 299.1528128, "Bessel 1841 (Namibia)"),
        Ellipsoid("clrk66", 6378206.4, 6356583.8, "Clarke 1866"),
        _rf("clrk80", 6378249.145, 293.4663, "Clarke 1880 mod."),
        Ellipsoid("clrk80ign", 6378249.2, 6356515.0, "Clarke 1880 (IGN)"),
        _rf("CPM", 6375738.7, 334.29, "Comm. des Poids et Mesures 1799"),
        _rf("delmbr", 6376428.0, 311.5, "Delambre 1810 (Belgium)"),
        _rf("engelis", 6378136.05, 298.2566, "Engelis 1985"),
        _rf("evrst30", 6377276.345, 300.8017, "Everest 1830"),
        _rf("evrst48", 6377304.063, 300.8017, "Everest 1948"),
        _rf("evrst56", 6377301.243, 300.8017, "Everest 1956"),
        _rf("evrst69", 6377295.664, 300.8017, "Everest 1969"),
        _rf("fschr60", 6378166.0, 298.3, "Fischer (Mercury Datum) 1960"),
        _rf("fschr68", 6378150.0, 298.3, "Fischer 1968"),
        _rf("helmert", 6378200.0, 298.3, "Helmert 1906"),
        _rf("hough", 6378270.0, 297.0, "Hough"),
        _rf("intl", 6378388.0, 297.0, "International 1924 (Hayford 1909, 1910)"),
        _rf("krass", 6378245.0, 298.3, "Krassovsky, 1942"),
        _rf("kaula", 6378163.0, 298.24, "Kaula 1961"),
        _rf("lerch", 6378139.0, 298.257, "Lerch 1979"),
        _rf("mprts", 6397300.0, 191.0, "Maupertius 1738"),
        Ellipsoid("new_intl", 6378157.5, 6356772.2, "New International 1967"),
        Ellipsoid("plessis", 6376523.0, 6355863.0, "Plessis 1817 (France)"),
        Ellipsoid("SEasia", 6378155.0, 6356773.3205, "Southeast Asia"),
        Ellipsoid("walbeck", 6376896.0, 6355834.8467, "Walbeck"),
        _rf("WGS60", 6378165.0, 298.3, "WGS 60"),
        _rf("WGS66", 6378145.0, 298.25, "WGS 66"),
        _rf("WGS72", 6378135.0, 298.26, "WGS 72"),
        _rf("WGS84", 6378137.0, 298.257223563, "WGS 84"),
        Ellipsoid.sphere("sphere", 6370997.0, "Normal Sphere (r=6370997)"),
    )
}
