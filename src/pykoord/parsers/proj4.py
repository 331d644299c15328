"""PROJ.4 parameter parser."""

from __future__ import annotations

import logging
from typing import Sequence

from pykoord.core.crs import CoordinateReferenceSystem
from pykoord.parsers.builder import build_crs, create_parameter_map
from pykoord.parsers.keywords import check_unsupported
from pykoord.registry import ParameterRegistry

logger = logging.getLogger(__name__)


def parse(
    registry: ParameterRegistry,
    name: str | None,
    tokens: Sequence[str],
) -> CoordinateReferenceSystem:
    """Parse PROJ.4 tokens ("+key=value" / "+flag") into a CRS.

    Args:
        registry: Registry to resolve named definitions against.
        name: CRS name, or None for an anonymous CRS.
        tokens: Parameter tokens in their original order.

    Returns:
        The constructed CoordinateReferenceSystem.

    Raises:
        UnsupportedParameter: If a key is not a PROJ.4 keyword, or the
            projection method is unknown.
        InvalidValue: If a value fails validation.
    """
    params = create_parameter_map(tokens)
    check_unsupported(params.keys())
    logger.debug("Parsing %d PROJ.4 parameters (name=%s)", len(tokens), name)
    return build_crs(registry, name, params, tokens)
