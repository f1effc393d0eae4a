"""LAND registry Update event -> Parcel / ParcelData / IndexedNFT records."""

from __future__ import annotations

from nftvendor.nft.ids import build_nft_id
from nftvendor.parcel.coordinates import decode_token_id
from nftvendor.parcel.data import DataType, build_data
from nftvendor.parcel.models import IndexedNFT, Parcel, ParcelUpdate

LAND_REGISTRY = "0xf87e31492faf9a91b02ee0deaad50d51d56d5d4d"


def get_parcel_text(parcel: Parcel, name: str) -> str:
    text = f"{parcel.x},{parcel.y}"
    if name:
        text += f",{name.lower()}"
    return text


def handle_update(
    asset_id: int | str, data: str, registry_address: str = LAND_REGISTRY
) -> ParcelUpdate:
    """Build records for an Update(assetId, data) event. Coordinates and NFT text only when data parses."""
    parcel_id = str(int(asset_id))
    id = build_nft_id(registry_address, parcel_id)
    parcel = Parcel(id=id, token_id=parcel_id, raw_data=data)

    parcel_data = build_data(id, data, DataType.PARCEL)
    if parcel_data is None:
        return ParcelUpdate(parcel=parcel)

    parcel.data_id = id
    parcel.x, parcel.y = decode_token_id(parcel_id)
    nft = IndexedNFT(id=id, name=parcel_data.name, search_text=get_parcel_text(parcel, parcel_data.name))
    return ParcelUpdate(parcel=parcel, data=parcel_data, nft=nft)
