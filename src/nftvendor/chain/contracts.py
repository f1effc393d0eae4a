"""On-chain contract transport protocol and the ERC721 surface used for transfers."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Protocol

# Minimal ERC721 ABI: only the methods the transfer dispatcher calls.
ERC721_ABI: list[dict[str, Any]] = [
    {
        "name": "transfer",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_to", "type": "address"},
            {"name": "_tokenId", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "name": "transferFrom",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "_from", "type": "address"},
            {"name": "_to", "type": "address"},
            {"name": "_tokenId", "type": "uint256"},
        ],
        "outputs": [],
    },
]


class TransferType(StrEnum):
    """Which transfer method a deployed contract implements."""

    TRANSFER = "transfer"
    SAFE_TRANSFER_FROM = "safe_transfer_from"


class ContractCall(Protocol):
    """A prepared contract method call."""

    async def send(self, *, sender: str) -> str:
        """Submit the transaction from `sender`; return its hash without waiting for a receipt."""
        ...


class ERC721Contract(Protocol):
    def transfer(self, to: str, token_id: str) -> ContractCall: ...
    def transfer_from(self, from_: str, to: str, token_id: str) -> ContractCall: ...


class ContractFactory(Protocol):
    """Builds bound contract instances from an ABI and address (RPC transport lives behind this)."""

    def build(self, abi: list[dict[str, Any]], address: str) -> ERC721Contract: ...
