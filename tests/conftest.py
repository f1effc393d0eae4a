"""Shared fakes: in-memory vendor API, fixed exchange rate, recording contract factory."""

from __future__ import annotations

from typing import Any

import pytest

from nftvendor.errors import RemoteFetchError
from nftvendor.models import NFTsFetchParams
from nftvendor.pricing.marketplace import MarketplacePrice
from nftvendor.vendor.super_rare.adapter import SuperRareAdapter
from nftvendor.vendor.super_rare.types import SuperRareAsset, SuperRareOrder

CONTRACT = "0xb932a70a57673d89f4acffbe830e8ed7f75fb9e0"
ONE_ETH = 10**18


def make_asset(id: str, owner: str, contract: str = CONTRACT, name: str = "") -> dict[str, Any]:
    return {
        "id": id,
        "contractAddress": contract,
        "name": name or f"Art #{id}",
        "description": "",
        "image": f"https://img.example/{id}.png",
        "url": f"https://superrare.co/artwork-v2/{id}",
        "owner": {"address": owner},
    }


def make_order(asset: dict[str, Any], amount_with_fee: str, taker: str | None = None) -> dict[str, Any]:
    return {
        "asset": asset,
        "amountWithFee": amount_with_fee,
        "marketContractAddress": "0x65b49f7aee40347f5a90b714be4ef086f3fe5e2c",
        "taker": {"address": taker} if taker else None,
        "timestamp": 1600000000000,
    }


class FakeSuperRareAPI:
    """Serves fixed asset/order lists; records every call."""

    def __init__(
        self,
        assets: list[dict[str, Any]] | None = None,
        orders: list[dict[str, Any]] | None = None,
        fail: set[str] | None = None,
    ) -> None:
        self.assets = [SuperRareAsset.model_validate(a) for a in assets or []]
        self.orders = [SuperRareOrder.model_validate(o) for o in orders or []]
        self.fail = fail or set()
        self.calls: list[tuple[str, Any]] = []

    def _check(self, name: str) -> None:
        if name in self.fail:
            raise RemoteFetchError(f"{name} failed", source="super_rare", status_code=503)

    def _page(self, rows: list[Any], params: NFTsFetchParams) -> list[Any]:
        if params.address:
            rows = [
                r for r in rows
                if (getattr(r, "asset", r)).owner.address.lower() == params.address.lower()
            ]
        return rows[params.skip : params.skip + params.first]

    async def fetch_nfts(self, params: NFTsFetchParams) -> list[SuperRareAsset]:
        self.calls.append(("fetch_nfts", params))
        self._check("fetch_nfts")
        return self._page(self.assets, params)

    async def fetch_orders(self, params: NFTsFetchParams) -> list[SuperRareOrder]:
        self.calls.append(("fetch_orders", params))
        self._check("fetch_orders")
        return self._page(self.orders, params)

    async def fetch_nft(self, contract_address: str, token_id: str) -> SuperRareAsset:
        self.calls.append(("fetch_nft", (contract_address, token_id)))
        self._check("fetch_nft")
        for a in self.assets:
            if a.id == token_id and a.contract_address.lower() == contract_address.lower():
                return a
        raise RemoteFetchError("not found", source="super_rare", status_code=404)

    async def fetch_order(self, contract_address: str, token_id: str) -> SuperRareOrder | None:
        self.calls.append(("fetch_order", (contract_address, token_id)))
        self._check("fetch_order")
        for o in self.orders:
            if o.asset.id == token_id:
                return o
        return None

    async def aclose(self) -> None:
        pass


class FixedRate:
    """Rate source returning a constant MANA-wei-per-ETH value."""

    def __init__(self, one_eth_in_mana: int, fail: bool = False) -> None:
        self.value = one_eth_in_mana
        self.fail = fail
        self.calls = 0

    async def one_eth_in_mana(self) -> int:
        self.calls += 1
        if self.fail:
            raise RemoteFetchError("rate unavailable", source="exchange_rate")
        return self.value


class RecordingCall:
    def __init__(self, log: list[tuple[Any, ...]], entry: tuple[Any, ...]) -> None:
        self.log = log
        self.entry = entry

    async def send(self, *, sender: str) -> str:
        self.log.append(self.entry + (sender,))
        return "0x" + "ab" * 32


class RecordingContract:
    def __init__(self, log: list[tuple[Any, ...]], address: str) -> None:
        self.log = log
        self.address = address

    def transfer(self, to: str, token_id: str) -> RecordingCall:
        return RecordingCall(self.log, ("transfer", self.address, to, token_id))

    def transfer_from(self, from_: str, to: str, token_id: str) -> RecordingCall:
        return RecordingCall(self.log, ("transfer_from", self.address, from_, to, token_id))


class RecordingFactory:
    def __init__(self) -> None:
        self.built: list[str] = []
        self.sent: list[tuple[Any, ...]] = []

    def build(self, abi: list[dict[str, Any]], address: str) -> RecordingContract:
        self.built.append(address)
        return RecordingContract(self.sent, address)


@pytest.fixture
def make_adapter():
    def _make(api: FakeSuperRareAPI, fee_per_million: int = 25_000) -> SuperRareAdapter:
        return SuperRareAdapter(api=api, marketplace_price=MarketplacePrice(fee_per_million))

    return _make
