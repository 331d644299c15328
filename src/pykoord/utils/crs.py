"""pyproj bridge — turn CRS descriptions into pyproj objects and transform."""

from __future__ import annotations

from typing import Any

import numpy as np
from pyproj import CRS, Transformer

from pykoord.core.crs import CoordinateReferenceSystem


def to_pyproj(crs_input: CoordinateReferenceSystem | CRS | Any | None) -> CRS | None:
    """Convert a CRS description to a pyproj.CRS.

    Args:
        crs_input: A pykoord CoordinateReferenceSystem, a pyproj.CRS, or
                   anything pyproj accepts as user input ("EPSG:25832",
                   WKT, PROJ string).

    Returns:
        pyproj.CRS object or None.
    """
    if crs_input is None:
        return None
    if isinstance(crs_input, CRS):
        return crs_input
    if isinstance(crs_input, CoordinateReferenceSystem):
        return CRS.from_proj4(crs_input.to_proj4())
    return CRS.from_user_input(crs_input)


def reproject_arrays(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    src_crs: CoordinateReferenceSystem | CRS | str,
    dst_crs: CoordinateReferenceSystem | CRS | str,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Reproject X, Y, Z arrays from one CRS to another.

    Geographic coordinates are longitude/latitude in degrees.

    Args:
        x, y, z: Coordinate arrays.
        src_crs: Source CRS.
        dst_crs: Target CRS.

    Returns:
        Tuple of (new_x, new_y, new_z) arrays.
    """
    src = to_pyproj(src_crs)
    dst = to_pyproj(dst_crs)
    transformer = Transformer.from_crs(src, dst, always_xy=True)
    new_x, new_y, new_z = transformer.transform(
        np.asarray(x, dtype=np.float64),
        np.asarray(y, dtype=np.float64),
        np.asarray(z, dtype=np.float64),
    )
    return (
        np.asarray(new_x, dtype=np.float64),
        np.asarray(new_y, dtype=np.float64),
        np.asarray(new_z, dtype=np.float64),
    )
