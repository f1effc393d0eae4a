"""Stable identifiers for NFTs and orders, shared by every vendor."""

from __future__ import annotations

from nftvendor.chain.address import parse_address


def build_nft_id(contract_address: str, token_id: str | int) -> str:
    """Return the platform id for a token: ``<lowercased contract>-<token id>``.

    The contract must be a 0x + 40 hex address (InvalidAddressError otherwise).
    It never contains ``-`` and has a fixed length, so distinct
    (contract, token) pairs never produce the same id.
    """
    return f"{parse_address(contract_address)}-{str(token_id).strip()}"


def build_order_id(vendor: str, asset_id: str | int) -> str:
    """Return the order id for a vendor-native asset id."""
    return f"{vendor}-order-{asset_id}"
