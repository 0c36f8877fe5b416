"""
LocationIQ request parameters

Normalization of the loosely typed call arguments into query records and
serialization of query mappings into URL query strings.
Each normalizer tries the accepted argument shapes in priority order and
returns the normalized record, or None if no shape matched.
"""

import math
from decimal import Decimal
from numbers import Real
from typing import Any, Mapping, Optional, Sequence
from urllib.parse import quote

from .models import NearbyQuery, ReverseQuery, SearchQuery

# encodeURIComponent-compatible set of characters left as is (on top of "-_.~")
QUERY_SAFE_CHARS = "!~*'()"

# Floats outside [EXPONENT_BELOW, EXPONENT_FROM) are written in exponent notation, as JavaScript does
EXPONENT_BELOW = 1e-6
EXPONENT_FROM = 1e21


def isNumeric(value: Any) -> bool:
    """Check if value is a number or a string holding a decimal number.

    Strings must look like a JavaScript number: digit separators ("1_000")
    and Python spellings of infinity ("inf") are rejected, "Infinity" is accepted.
    Empty and blank strings are not numeric.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Real):
        return not math.isnan(value)
    if isinstance(value, str):
        if "_" in value:
            return False
        try:
            number = float(value)
        except ValueError:
            return False
        if math.isnan(number):
            return False
        if math.isinf(number):
            return value.strip().lstrip("+-") == "Infinity"
        return True
    return False


def formatNumber(value: float) -> str:
    """Format float the way JavaScript converts numbers to strings.

    Example:
        >>> formatNumber(48.0), formatNumber(1e-07), formatNumber(0.00001)
        ('48', '1e-7', '0.00001')
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    magnitude = abs(value)
    if magnitude == 0:
        return "0"
    if EXPONENT_BELOW <= magnitude < EXPONENT_FROM:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    mantissa, exponent = repr(value).split("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    return f"{mantissa}e{'-' if exponent.startswith('-') else '+'}{int(exponent.lstrip('+-'))}"


def _isSequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _firstPresent(mapping: Mapping[str, Any], *keys: str) -> Any:
    """Return value of the first key present (and not None) in mapping."""
    for key in keys:
        value = mapping.get(key)
        if value is not None:
            return value
    return None


def _formatValue(value: Any) -> str:
    return formatNumber(value) if isinstance(value, float) else str(value)


def _coordinate(value: Any) -> Optional[str]:
    # None stays None so the serializer drops it
    if value is None:
        return None
    return _formatValue(value)


def normalizeReverseParams(params: Sequence[Any]) -> Optional[ReverseQuery]:
    """Normalize reverse() arguments, dood!

    Accepted shapes:
        (latitude, longitude)
        ([latitude, longitude])
        ({"lat": ..., "lng": ...}) or ({"latitude": ..., "longitude": ...})

    Returns:
        ReverseQuery or None if arguments are invalid
    """
    if len(params) >= 2 and isNumeric(params[0]) and isNumeric(params[1]):
        return {"lat": _coordinate(params[0]), "lon": _coordinate(params[1])}

    if not params:
        return None
    first = params[0]

    if _isSequence(first):
        if len(first) < 2:
            return None
        return {"lat": _coordinate(first[0]), "lon": _coordinate(first[1])}

    if isinstance(first, Mapping):
        return {
            "lat": _coordinate(_firstPresent(first, "lat", "latitude")),
            "lon": _coordinate(_firstPresent(first, "lng", "longitude")),
        }

    return None


def normalizeSearchParams(params: Sequence[Any]) -> Optional[SearchQuery]:
    """Normalize search() arguments: the only accepted shape is (address: str)."""
    if params and isinstance(params[0], str):
        return {"q": params[0]}
    return None


def normalizeNearbyParams(params: Sequence[Any]) -> Optional[NearbyQuery]:
    """Normalize nearby() arguments, dood!

    Accepted shapes:
        (latitude, longitude, tag, radius)
        ([latitude, longitude, tag, radius])
        ({"lat"|"latitude": ..., "lng"|"longitude": ..., "tag": ..., "radius": ...})

    Returns:
        NearbyQuery or None if arguments are invalid
    """
    if (
        len(params) >= 4
        and isNumeric(params[0])
        and isNumeric(params[1])
        and isinstance(params[2], str)
        and isNumeric(params[3])
    ):
        return {
            "lat": _coordinate(params[0]),
            "lon": _coordinate(params[1]),
            "tag": params[2],
            "radius": params[3],
        }

    if not params:
        return None
    first = params[0]

    if _isSequence(first):
        if len(first) < 4:
            return None
        return {
            "lat": _coordinate(first[0]),
            "lon": _coordinate(first[1]),
            "tag": first[2],
            "radius": first[3],
        }

    if isinstance(first, Mapping):
        return {
            "lat": _coordinate(_firstPresent(first, "lat", "latitude")),
            "lon": _coordinate(_firstPresent(first, "lng", "longitude")),
            "tag": first.get("tag"),
            "radius": first.get("radius"),
        }

    return None


def toQueryParams(params: Mapping[str, Any]) -> str:
    """Convert mapping into URL query string, dood!

    Keys are kept in mapping order, keys with falsy values ("", 0, None, False)
    are dropped and values are percent-encoded.

    Example:
        >>> toQueryParams({"q": "10 Downing Street", "radius": 0})
        'q=10%20Downing%20Street'
    """
    return "&".join(
        f"{key}={quote(_formatValue(value), safe=QUERY_SAFE_CHARS)}" for key, value in params.items() if value
    )
