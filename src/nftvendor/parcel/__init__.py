"""LAND parcel decoding: token id <-> coordinates and Update event data."""

from nftvendor.parcel.coordinates import decode_token_id, encode_coordinates
from nftvendor.parcel.data import DataType, build_data
from nftvendor.parcel.handlers import LAND_REGISTRY, get_parcel_text, handle_update
from nftvendor.parcel.models import IndexedNFT, Parcel, ParcelData, ParcelUpdate

__all__ = [
    "decode_token_id",
    "encode_coordinates",
    "DataType",
    "build_data",
    "LAND_REGISTRY",
    "get_parcel_text",
    "handle_update",
    "IndexedNFT",
    "Parcel",
    "ParcelData",
    "ParcelUpdate",
]
