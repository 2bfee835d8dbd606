"""Encoded polyline codec (precision 5).

Implements the delta / zig-zag / 5-bit-group algorithm documented at
https://developers.google.com/maps/documentation/utilities/polylinealgorithm
"""

import math

from otp_itineraries.domain.models.coordinate import Coordinate

PRECISION_FACTOR = 1e5

_CHAR_OFFSET = 63
_CHUNK_BITS = 5
_CHUNK_MASK = 0x1F
_CONTINUATION_BIT = 0x20
# A 32-bit value spans at most seven chunks; anything longer is garbage.
_MAX_SHIFT = 30


def _read_value(encoded: str, index: int) -> tuple[int, int] | None:
    """Read one zig-zag encoded value starting at index.

    Returns (value, next_index), or None if the input is truncated or holds a
    character outside the polyline alphabet.
    """
    result = 0
    shift = 0
    while True:
        if index >= len(encoded) or shift > _MAX_SHIFT:
            return None
        chunk = ord(encoded[index]) - _CHAR_OFFSET
        if chunk < 0 or chunk > 0x3F:
            return None
        index += 1
        result |= (chunk & _CHUNK_MASK) << shift
        shift += _CHUNK_BITS
        if chunk < _CONTINUATION_BIT:
            break

    value = ~(result >> 1) if result & 1 else result >> 1
    return value, index


def decode_polyline(encoded: str) -> list[Coordinate]:
    """Decode a polyline string into coordinates.

    An empty or malformed string decodes to an empty list; nothing is raised.
    """
    coordinates: list[Coordinate] = []
    index = 0
    lat = 0
    lng = 0

    while index < len(encoded):
        lat_read = _read_value(encoded, index)
        if lat_read is None:
            return []
        dlat, index = lat_read

        lng_read = _read_value(encoded, index)
        if lng_read is None:
            return []
        dlng, index = lng_read

        lat += dlat
        lng += dlng
        coordinates.append(Coordinate(lat / PRECISION_FACTOR, lng / PRECISION_FACTOR))

    return coordinates


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _encode_value(value: int) -> str:
    shifted = ~(value << 1) if value < 0 else value << 1
    chunks = []
    while shifted >= _CONTINUATION_BIT:
        chunks.append(chr((_CONTINUATION_BIT | (shifted & _CHUNK_MASK)) + _CHAR_OFFSET))
        shifted >>= _CHUNK_BITS
    chunks.append(chr(shifted + _CHAR_OFFSET))
    return "".join(chunks)


def encode_coordinates(coordinates: list[Coordinate]) -> str:
    """Encode coordinates into a polyline string.

    Each coordinate is rounded to five decimals, halves away from zero, and
    encoded as a delta from the previous one, starting from (0, 0).
    """
    parts = []
    prev_lat = 0
    prev_lng = 0

    for coordinate in coordinates:
        lat = _round_half_away_from_zero(coordinate.latitude * PRECISION_FACTOR)
        lng = _round_half_away_from_zero(coordinate.longitude * PRECISION_FACTOR)
        parts.append(_encode_value(lat - prev_lat))
        parts.append(_encode_value(lng - prev_lng))
        prev_lat = lat
        prev_lng = lng

    return "".join(parts)
