"""Helpers for float normalization of ERP amounts."""

import math


def coerce_float(value) -> float:
    """Normalize a raw amount to float.

    Missing, empty, unparsable and non-finite values become ``0.0``.
    Partially numeric strings such as ``"12abc"`` are unparsable too and
    become ``0.0`` rather than their leading number; ERP amounts arrive as
    plain numbers, so a trailing suffix signals bad data.

    Args:
        value: Raw numeric value from the ERP payload or storage.

    Returns:
        float: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


__all__ = ["coerce_float"]
