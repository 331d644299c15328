"""Parameter splitter — PROJ.4 parameter strings to token lists."""

from __future__ import annotations


def split_parameters(text: str) -> list[str]:
    """Split a PROJ.4 parameter string into its tokens.

    Splits on runs of whitespace and drops the empty pieces left by
    leading or trailing whitespace. Token contents are not inspected:
    "proj=merc" without a leading "+" passes through unchanged.

    Args:
        text: Parameter string, e.g. "+proj=utm +zone=32 +datum=WGS84".

    Returns:
        Ordered list of tokens (empty for blank input).
    """
    return text.split()
