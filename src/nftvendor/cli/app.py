"""Root CLI app - entry point and command registration."""

from pathlib import Path

import typer

from nftvendor.config import get_settings
from nftvendor.config.settings import configure_logging

app = typer.Typer(
    name="nftv",
    help="nftvendor - Normalize marketplace NFT listings and decode LAND parcels.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Path | None = typer.Option(
        None, "--config-dir", "-C", help="Config directory (default: ./config or package config)"
    ),
    profile: str | None = typer.Option(
        None, "--profile", "-p", help="Config profile (e.g. dev) to overlay on default.toml"
    ),
) -> None:
    """Configure logging and store options in context."""
    settings = get_settings(profile, config_dir)
    configure_logging(settings)
    ctx.obj = {"settings": settings, "config_dir": config_dir, "profile": profile}


# Subcommands registered from other modules
from nftvendor.cli import nfts, parcels  # noqa: E402

app.add_typer(nfts.app, name="nfts")
app.add_typer(parcels.app, name="parcels")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
