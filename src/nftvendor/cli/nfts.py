"""NFTs subcommand: list, count, show."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import typer

from nftvendor.config.settings import Settings
from nftvendor.errors import NFTVendorError
from nftvendor.models import NFTsCountParams, NFTsFetchParams, Vendor
from nftvendor.pricing.converter import TokenConverter
from nftvendor.vendor.registry import get_adapter
from nftvendor.vendor.service import NFTService

app = typer.Typer(help="Fetch normalized NFTs, orders and owners from a vendor")


def build_service(settings: Settings, vendor: Vendor) -> NFTService:
    adapter = get_adapter(vendor, settings)
    converter = TokenConverter(
        settings.exchange_rate_url,
        ttl_sec=settings.exchange_rate_ttl_sec,
        timeout=settings.exchange_rate_timeout_sec,
    )
    return NFTService(adapter, converter)


def _run(settings: Settings, vendor: Vendor, call: Callable[[NFTService], Awaitable[Any]]) -> Any:
    async def go() -> Any:
        service = build_service(settings, vendor)
        try:
            return await call(service)
        finally:
            await service.adapter.aclose()

    try:
        return asyncio.run(go())
    except NFTVendorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("list")
def list_nfts(
    ctx: typer.Context,
    vendor: Vendor = typer.Option(Vendor.SUPER_RARE, "--vendor", help="Vendor to query"),
    address: str | None = typer.Option(None, "--address", "-a", help="Only NFTs owned by address"),
    on_sale: bool = typer.Option(False, "--on-sale", help="Only NFTs with an open order"),
    first: int = typer.Option(24, "--first", "-n", help="Page size"),
    skip: int = typer.Option(0, "--skip", help="Page offset"),
) -> None:
    """List one page of normalized NFTs with their active order price."""
    params = NFTsFetchParams(
        vendor=vendor, address=address, only_on_sale=on_sale, first=first, skip=skip
    )
    nfts, accounts, orders, total = _run(ctx.obj["settings"], vendor, lambda s: s.fetch(params))
    prices = {o.id: o.price for o in orders}
    for nft in nfts:
        price = prices.get(nft.active_order_id or "", "-")
        typer.echo(f"  {nft.id}  {nft.name[:40]:<40}  {price}")
    typer.echo(f"Showing {len(nfts)} of {total} ({len(orders)} on sale, {len(accounts)} owners)")


@app.command("count")
def count(
    ctx: typer.Context,
    vendor: Vendor = typer.Option(Vendor.SUPER_RARE, "--vendor", help="Vendor to query"),
    address: str | None = typer.Option(None, "--address", "-a", help="Only NFTs owned by address"),
    on_sale: bool = typer.Option(False, "--on-sale", help="Only NFTs with an open order"),
) -> None:
    """Count the vendor's NFTs matching the filter."""
    params = NFTsCountParams(vendor=vendor, address=address, only_on_sale=on_sale)
    typer.echo(str(_run(ctx.obj["settings"], vendor, lambda s: s.count(params))))


@app.command("show")
def show(
    ctx: typer.Context,
    contract_address: str = typer.Argument(..., help="Token contract address"),
    token_id: str = typer.Argument(..., help="Token id"),
    vendor: Vendor = typer.Option(Vendor.SUPER_RARE, "--vendor", help="Vendor to query"),
) -> None:
    """Show one NFT and its open order as JSON."""
    nft, order = _run(
        ctx.obj["settings"], vendor, lambda s: s.fetch_one(contract_address, token_id)
    )
    typer.echo(nft.model_dump_json(indent=2))
    if order is not None:
        typer.echo(order.model_dump_json(indent=2))
