"""Order, OrderStatus - canonical sale order."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from nftvendor.models.nft import NFTCategory


class OrderStatus(StrEnum):
    OPEN = "open"
    SOLD = "sold"
    CANCELLED = "cancelled"


class Order(BaseModel):
    """Active sale order for one NFT. Prices are wei amounts encoded as decimal strings."""

    id: str
    nft_id: str
    category: NFTCategory
    nft_address: str
    market_address: str
    owner: str
    buyer: str | None = None  # None when unsold, never ""
    price: str = Field(..., pattern=r"^\d+$", description="Settlement (MANA) wei")
    eth_price: str = Field(..., pattern=r"^\d+$", description="Fee-inclusive ETH wei")
    status: OrderStatus = OrderStatus.OPEN
    created_at: int | None = None
    updated_at: int | None = None
