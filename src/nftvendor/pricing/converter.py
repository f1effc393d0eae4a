"""ETH -> MANA exchange rate lookup with a short-lived cache."""

from __future__ import annotations

import asyncio
import time
from decimal import ROUND_FLOOR, Decimal, InvalidOperation, localcontext
from typing import Any, Protocol

import httpx
import structlog

from nftvendor.errors import RemoteFetchError
from nftvendor.pricing.marketplace import ONE_ETH_IN_WEI

log = structlog.get_logger(__name__)

DEFAULT_RATE_URL = "http://127.0.0.1:5000/rate"


class RateSource(Protocol):
    """Anything that can price one ETH in MANA wei."""

    async def one_eth_in_mana(self) -> int: ...


def to_wei(amount: str | Decimal) -> int:
    """Decimal ether-unit amount -> wei. Digits past 18 decimals are floored."""
    try:
        value = Decimal(str(amount))
    except InvalidOperation as e:
        raise ValueError(f"Not a decimal amount: {amount!r}") from e
    if not value.is_finite() or value < 0:
        raise ValueError(f"Amount must be a finite non-negative decimal, got {amount!r}")
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + 19)
        return int((value * ONE_ETH_IN_WEI).to_integral_value(rounding=ROUND_FLOOR))


def _parse_rate(data: Any) -> str:
    if isinstance(data, dict):
        if "rate" in data:
            return str(data["rate"])
        inner = data.get("data")
        if isinstance(inner, dict) and "rate" in inner:
            return str(inner["rate"])
    raise ValueError("rate missing from response")


class TokenConverter:
    """Fetch how much MANA one ETH buys, cached for ttl_sec."""

    def __init__(
        self,
        rate_url: str = DEFAULT_RATE_URL,
        *,
        ttl_sec: float = 60.0,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.rate_url = rate_url
        self.ttl_sec = ttl_sec
        self.timeout = timeout
        self._client = client
        self._cached: int | None = None
        self._cached_at = 0.0
        self._lock = asyncio.Lock()

    async def market_eth_to_mana(self, quantity: int = 1) -> Decimal:
        """Ask the rate source for the MANA amount of `quantity` ETH (ether units)."""
        params = {"base": "ETH", "quote": "MANA", "qty": quantity}
        try:
            if self._client is not None:
                resp = await self._client.get(self.rate_url, params=params)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.get(self.rate_url, params=params)
            resp.raise_for_status()
            return Decimal(_parse_rate(resp.json()))
        except httpx.HTTPStatusError as e:
            raise RemoteFetchError(
                "Exchange rate request failed",
                source="exchange_rate",
                status_code=e.response.status_code,
                url=str(e.request.url),
            ) from e
        except httpx.HTTPError as e:
            raise RemoteFetchError(
                f"Exchange rate request failed: {e}", source="exchange_rate", url=self.rate_url
            ) from e
        except (ValueError, InvalidOperation) as e:
            raise RemoteFetchError(
                f"Malformed exchange rate response: {e}", source="exchange_rate", url=self.rate_url
            ) from e

    async def one_eth_in_mana(self) -> int:
        """MANA wei for one ETH. Concurrent callers share one in-flight request."""
        async with self._lock:
            now = time.monotonic()
            if self._cached is not None and now - self._cached_at < self.ttl_sec:
                return self._cached
            mana = await self.market_eth_to_mana(1)
            try:
                rate = to_wei(mana)
            except ValueError as e:
                raise RemoteFetchError(
                    f"Unusable exchange rate: {mana}", source="exchange_rate", url=self.rate_url
                ) from e
            self._cached = rate
            self._cached_at = time.monotonic()
            log.debug("exchange_rate_refreshed", one_eth_in_mana=str(rate))
            return rate
