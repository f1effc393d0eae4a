"""NFT, NFTCategory, Vendor - canonical entities."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class Vendor(StrEnum):
    """Marketplace a record was sourced from."""

    DECENTRALAND = "decentraland"
    SUPER_RARE = "super_rare"


class NFTCategory(StrEnum):
    PARCEL = "parcel"
    ESTATE = "estate"
    WEARABLE = "wearable"
    ENS = "ens"
    ART = "art"


class NFT(BaseModel):
    """Canonical NFT - vendor-agnostic."""

    id: str  # build_nft_id(contract_address, token_id)
    token_id: str
    contract_address: str
    owner: str
    name: str = ""
    image: str = ""
    url: str = ""
    data: dict[str, Any] = Field(default_factory=dict)
    category: NFTCategory
    vendor: Vendor
    active_order_id: str | None = None


class NFTsCountParams(BaseModel):
    """Filter for count queries."""

    address: str | None = None
    only_on_sale: bool = False
    category: NFTCategory | None = None
    vendor: Vendor = Vendor.SUPER_RARE


class NFTsFetchParams(NFTsCountParams):
    """Filter plus pagination for fetch queries."""

    first: int = Field(24, ge=0)
    skip: int = Field(0, ge=0)
