"""Marketplace fee and ETH -> MANA price reconciliation (integer wei arithmetic only)."""

from __future__ import annotations

from typing import NamedTuple

ONE_ETH_IN_WEI = 10**18
ONE_MILLION = 1_000_000
DEFAULT_FEE_PER_MILLION = 25_000  # 2.5%


class ReconciledPrice(NamedTuple):
    price: str  # MANA wei
    eth_price: str  # fee-inclusive ETH wei, as reported by the vendor


def _to_int(amount: str | int) -> int:
    if isinstance(amount, bool):
        raise TypeError("amount must be an integer or a decimal string")
    if isinstance(amount, int):
        value = amount
    else:
        s = str(amount).strip()
        if not s.isdigit():
            raise ValueError(f"Amount must be a non-negative integer string, got {amount!r}")
        value = int(s)
    if value < 0:
        raise ValueError(f"Amount must be non-negative, got {amount!r}")
    return value


class MarketplacePrice:
    """Fee the marketplace charges on top of a vendor price, in parts per million."""

    def __init__(self, fee_per_million: int = DEFAULT_FEE_PER_MILLION) -> None:
        if fee_per_million < 0:
            raise ValueError("fee_per_million must be non-negative")
        self.fee_per_million = fee_per_million

    def get_fee(self, price: str | int) -> int:
        return _to_int(price) * self.fee_per_million // ONE_MILLION

    def add_fee(self, price: str | int) -> int:
        value = _to_int(price)
        return value + self.get_fee(value)


def reconcile_price(
    raw_price: str | int,
    one_eth_in_mana: str | int,
    marketplace_price: MarketplacePrice | None = None,
) -> ReconciledPrice:
    """
    Convert a fee-inclusive vendor price in ETH wei to MANA wei.
    Fee is added in ETH first, then floor(total * rate / 10**18). The only rounding is that final floor.
    """
    marketplace_price = marketplace_price or MarketplacePrice()
    total_wei = marketplace_price.add_fee(raw_price)
    rate = _to_int(one_eth_in_mana)
    price = total_wei * rate // ONE_ETH_IN_WEI
    return ReconciledPrice(price=str(price), eth_price=str(_to_int(raw_price)))
