"""Parameter splitting and the PROJ.4 / Esri parsers."""

from pykoord.parsers.esri import parse_esri
from pykoord.parsers.proj4 import parse
from pykoord.parsers.splitter import split_parameters

__all__ = ["parse", "parse_esri", "split_parameters"]
