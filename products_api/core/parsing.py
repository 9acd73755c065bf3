"""Lenient number parsing for raw query-string and path values.

Query parameters arrive as untrusted strings. These helpers read the leading
numeric prefix (``"12abc"`` -> 12, ``" 2.5 "`` -> 2.5) and return ``None``
when there is nothing numeric to read, so callers can fall back to defaults
instead of failing the request.
"""

import math
import re

# Largest value a SQLite INTEGER column can hold
MAX_SQL_INTEGER = 2**63 - 1

_INT_PREFIX =re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(raw: object) -> int | None:
    """Return the integer prefix of *raw*, or ``None``."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    match = _INT_PREFIX.match(str(raw))
    return int(match.group(1)) if match else None


def parse_float(raw: object) -> float | None:
    """Return the finite float prefix of *raw*, or ``None``."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        match = _FLOAT_PREFIX.match(str(raw))
        if not match:
            return None
        value = float(match.group(1))
    return value if math.isfinite(value) else None
