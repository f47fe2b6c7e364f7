"""Best-effort integer coercion for loosely typed JSON input."""

import math
import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Balances are stored in a signed 64-bit column.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def coerce_int(value: Any, default: int = 0) -> int:
    """Parse ``value`` as an integer, falling back to ``default``.

    Strings contribute their leading integer (``"12abc"`` -> 12,
    ``" -3.9"`` -> -3), finite floats are truncated toward zero, and
    anything else (``None``, booleans, ``NaN``, infinities, lists, objects,
    non-numeric strings) yields ``default``. Results outside the signed
    64-bit range also yield ``default``.
    """

    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return default
        parsed = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            return default
        parsed = int(match.group(1))
    else:
        return default
    if not INT64_MIN <= parsed <= INT64_MAX:
        return default
    return parsed
