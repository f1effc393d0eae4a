"""Result shapes returned by vendor services."""

from __future__ import annotations

from typing import NamedTuple

from nftvendor.models.account import Account
from nftvendor.models.nft import NFT
from nftvendor.models.order import Order


class NFTsFetchResult(NamedTuple):
    nfts: list[NFT]
    accounts: list[Account]
    orders: list[Order]
    total: int


class NFTFetchOneResult(NamedTuple):
    nft: NFT
    order: Order | None
