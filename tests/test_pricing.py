"""Marketplace fee, ETH -> MANA reconciliation and wei conversion."""

from decimal import Decimal

import pytest

from nftvendor.pricing.converter import to_wei
from nftvendor.pricing.marketplace import MarketplacePrice, reconcile_price

ONE_ETH = 10**18


@pytest.mark.parametrize(
    "raw, rate, fee_per_million, expected",
    [
        ("1000", 100 * ONE_ETH, 25_000, "102500"),
        (10**20, ONE_ETH + 1, 0, "100000000000000000100"),
        (ONE_ETH, 1234567890123456789000, 0, "1234567890123456789000"),
        ("3", ONE_ETH // 3, 0, "0"),
        ("999999999999999999", 2 * ONE_ETH, 25_000, "2049999999999999996"),
        ("0", 100 * ONE_ETH, 25_000, "0"),
    ],
)
def test_reconcile_price_matches_integer_reference(raw, rate, fee_per_million, expected):
    result = reconcile_price(raw, rate, MarketplacePrice(fee_per_million))
    assert result.price == expected
    assert result.eth_price == str(int(raw))
    assert result.price.isdigit()


def test_reconcile_price_keeps_precision_where_float_does_not():
    raw, rate = 10**20, ONE_ETH + 1
    expected = 10**20 + 100
    assert int(float(raw) * float(rate) / 1e18) != expected
    assert reconcile_price(raw, rate, MarketplacePrice(0)).price == str(expected)


def test_fee_is_added_before_conversion():
    mp = MarketplacePrice(30_000)
    assert mp.get_fee("1000000") == 30_000
    assert mp.add_fee("1000000") == 1_030_000
    # 1.03 ETH at 2 MANA/ETH
    assert reconcile_price(ONE_ETH, 2 * ONE_ETH, mp).price == str(2_060_000_000_000_000_000)


def test_reconcile_rejects_bad_amounts():
    with pytest.raises(ValueError):
        reconcile_price("-1", ONE_ETH)
    with pytest.raises(ValueError):
        reconcile_price("1.5", ONE_ETH)
    with pytest.raises(ValueError):
        MarketplacePrice(-1)


def test_to_wei_is_exact():
    assert to_wei("1") == ONE_ETH
    assert to_wei("0.1") == 10**17
    assert to_wei("1234.567890123456789") == 1234567890123456789000
    assert to_wei(Decimal("2.5")) == 25 * 10**17
    # below one wei is floored
    assert to_wei("0.0000000000000000019") == 1
    with pytest.raises(ValueError):
        to_wei("-1")
    with pytest.raises(ValueError):
        to_wei("abc")
