"""pykoord — coordinate reference system resolution and construction."""

from pykoord._version import __version__
from pykoord.core.crs import CoordinateReferenceSystem
from pykoord.errors import (
    InvalidValue,
    KoordError,
    MalformedSyntax,
    ParseError,
    UnknownAuthorityCode,
    UnsupportedParameter,
)
from pykoord.factory import CRSFactory
from pykoord.parsers.splitter import split_parameters
from pykoord.registry import ParameterRegistry

__all__ = [
    "__version__",
    "CRSFactory",
    "CoordinateReferenceSystem",
    "ParameterRegistry",
    "split_parameters",
    "KoordError",
    "UnknownAuthorityCode",
    "ParseError",
    "UnsupportedParameter",
    "InvalidValue",
    "MalformedSyntax",
]
