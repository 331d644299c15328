"""Angle parsing — decimal degrees and PROJ DMS notation.

Accepted forms:
    "45.5", "-126"            decimal degrees
    "-85d50", "30d30'15\"N"   degrees, minutes, seconds with hemisphere
    "0.7853981r"              radians
"""

from __future__ import annotations

import math
import re

from pykoord.errors import InvalidValue

_DMS_PATTERN = re.compile(
    r"(?P<sign>[-+])?"
    r"(?P<deg>\d+(?:\.\d*)?|\.\d+)[dD]"
    r"(?:(?P<min>\d+(?:\.\d*)?|\.\d+)'?)?"
    r"(?:(?P<sec>\d+(?:\.\d*)?|\.\d+)\")?"
    r"(?P<hemi>[NSEWnsew])?"
)

_HEMI_PATTERN = re.compile(r"(?P<num>\d+(?:\.\d*)?|\.\d+)(?P<hemi>[NSEWnsew])")


def _finite(key: str, text: str) -> float | None:
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        raise InvalidValue(key, text, "angle must be finite")
    return value


def parse_angle(key: str, text: str) -> float:
    """Parse an angle to decimal degrees.

    Args:
        key: Parameter name, used in error reports.
        text: Angle text.

    Returns:
        Angle in decimal degrees.

    Raises:
        InvalidValue: If the text is not a recognizable angle.
    """
    text = text.strip()
    if not text:
        raise InvalidValue(key, text, "angle is empty")

    value = _finite(key, text)
    if value is not None:
        return value

    if text[-1] in "rR":
        radians = _finite(key, text[:-1])
        if radians is not None:
            return math.degrees(radians)

    m = _HEMI_PATTERN.fullmatch(text)
    if m:
        value = float(m.group("num"))
        return -value if m.group("hemi").upper() in "SW" else value

    m = _DMS_PATTERN.fullmatch(text)
    if not m:
        raise InvalidValue(key, text, "not an angle")
    if m.group("sign") and m.group("hemi"):
        raise InvalidValue(key, text, "sign and hemisphere are mutually exclusive")

    minutes = float(m.group("min") or 0.0)
    seconds = float(m.group("sec") or 0.0)
    if minutes >= 60.0 or seconds >= 60.0:
        raise InvalidValue(key, text, "minutes and seconds must be below 60")

    value = float(m.group("deg")) + minutes / 60.0 + seconds / 3600.0
    if m.group("sign") == "-":
        value = -value
    hemi = m.group("hemi")
    if hemi and hemi.upper() in "SW":
        value = -value
    return value
