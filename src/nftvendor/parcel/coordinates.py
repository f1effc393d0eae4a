"""Parcel token id <-> (x, y). The id packs x in the high 128 bits and y in the low 128 bits."""

from __future__ import annotations

_BITS = 128
_MASK = (1 << _BITS) - 1
_SIGN = 1 << (_BITS - 1)
_MAX_TOKEN_ID = (1 << (2 * _BITS)) - 1


def _to_signed(value: int) -> int:
    return value - (1 << _BITS) if value & _SIGN else value


def decode_token_id(token_id: int | str) -> tuple[int, int]:
    """Return signed (x, y) for a parcel token id."""
    value = int(token_id)
    if value < 0 or value > _MAX_TOKEN_ID:
        raise ValueError(f"Token id out of uint256 range: {token_id}")
    return _to_signed(value >> _BITS), _to_signed(value & _MASK)


def encode_coordinates(x: int, y: int) -> int:
    if not (-_SIGN <= x < _SIGN and -_SIGN <= y < _SIGN):
        raise ValueError(f"Coordinates out of int128 range: ({x}, {y})")
    return ((x & _MASK) << _BITS) | (y & _MASK)
