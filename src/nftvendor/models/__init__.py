"""Canonical schema (Pydantic) - NFT, Order, Account."""

from nftvendor.models.account import Account
from nftvendor.models.nft import NFT, NFTCategory, NFTsCountParams, NFTsFetchParams, Vendor
from nftvendor.models.order import Order, OrderStatus
from nftvendor.models.results import NFTFetchOneResult, NFTsFetchResult

__all__ = [
    "NFT",
    "NFTCategory",
    "NFTsCountParams",
    "NFTsFetchParams",
    "Vendor",
    "Order",
    "OrderStatus",
    "Account",
    "NFTsFetchResult",
    "NFTFetchOneResult",
]
