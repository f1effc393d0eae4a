"""Parcels subcommand: decode, update."""

from __future__ import annotations

import typer

from nftvendor.parcel import LAND_REGISTRY, decode_token_id, encode_coordinates, handle_update

app = typer.Typer(help="LAND parcel token ids and Update event data")


@app.command("decode")
def decode(token_id: str = typer.Argument(..., help="Parcel token id (decimal)")) -> None:
    """Print the (x, y) coordinates packed in a parcel token id."""
    try:
        x, y = decode_token_id(token_id)
    except ValueError as e:
        typer.echo(f"Invalid token id: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"{x},{y}")


@app.command("encode")
def encode(
    x: int = typer.Argument(...),
    y: int = typer.Argument(...),
) -> None:
    """Print the token id for parcel coordinates."""
    try:
        typer.echo(str(encode_coordinates(x, y)))
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)


@app.command("update")
def update(
    token_id: str = typer.Argument(..., help="Parcel token id (decimal)"),
    data: str = typer.Argument(..., help='Raw data field, e.g. 0,"Name","Description",""'),
    registry: str = typer.Option(LAND_REGISTRY, "--registry", help="LAND registry address"),
) -> None:
    """Decode an Update event into parcel records and print them as JSON."""
    try:
        result = handle_update(token_id, data, registry)
    except ValueError as e:
        typer.echo(f"Invalid update: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(result.model_dump_json(indent=2))
