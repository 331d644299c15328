"""PROJ database resolver backed by pyproj."""

from __future__ import annotations

import logging
import warnings

from pyproj import CRS
from pyproj.exceptions import CRSError

from pykoord.resolvers.base import NameResolver, split_name

logger = logging.getLogger(__name__)


class PyprojResolver(NameResolver):
    """Resolve names through the PROJ database that ships with pyproj.

    Covers every authority the database knows (EPSG, ESRI, IGNF, ...).
    The definition is exported with ``CRS.to_proj4()``, so details that
    PROJ.4 strings cannot express are dropped.
    """

    def lookup(self, name: str) -> str | None:
        authority, code = split_name(name)
        try:
            crs = CRS.from_authority(authority.upper(), code)
            with warnings.catch_warnings():
                # to_proj4() warns about information loss on every call
                warnings.simplefilter("ignore", UserWarning)
                params = crs.to_proj4()
        except CRSError:
            logger.debug("PROJ database has no definition for %s", name)
            return None
        return params or None
