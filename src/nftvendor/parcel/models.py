"""Parcel, ParcelData, IndexedNFT - records produced from LAND Update events."""

from __future__ import annotations

from pydantic import BaseModel


class ParcelData(BaseModel):
    id: str
    version: str = "0"
    name: str = ""
    description: str = ""
    ipns: str = ""


class Parcel(BaseModel):
    id: str
    token_id: str
    raw_data: str = ""
    data_id: str | None = None
    x: int | None = None
    y: int | None = None


class IndexedNFT(BaseModel):
    """Searchable name of an NFT as derived from on-chain data."""

    id: str
    name: str = ""
    search_text: str = ""


class ParcelUpdate(BaseModel):
    parcel: Parcel
    data: ParcelData | None = None
    nft: IndexedNFT | None = None
