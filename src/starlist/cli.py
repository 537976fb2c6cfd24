"""Click CLI commands for Starlist."""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from starlist.config import load_config
from starlist.display import console, display_restaurants, display_starred
from starlist.errors import StarlistError
from starlist.models import AppConfig
from starlist.store.factory import build_store

config_option = click.option(
    "-c", "--config", "config_file",
    type=click.Path(exists=True, dir_okay=False),
    envvar="STARLIST_CONFIG",
    help="YAML config file.",
)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load(config_file: str | None) -> AppConfig:
    try:
        return load_config(config_file)
    except StarlistError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Starlist: keep a list of your favourite restaurants."""
    _setup_logging(verbose)


@main.command()
@config_option
def show(config_file: str | None) -> None:
    """Print the starred restaurants."""
    config = _load(config_file)

    async def _show() -> list[dict]:
        store = await build_store(config)
        try:
            return await store.list_starred()
        finally:
            await store.close()

    try:
        display_starred(asyncio.run(_show()))
    except StarlistError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


@main.command()
@config_option
def restaurants(config_file: str | None) -> None:
    """Print the restaurant catalog."""
    config = _load(config_file)

    async def _list() -> list[dict]:
        store = await build_store(config)
        try:
            return await store.list_restaurants()
        finally:
            await store.close()

    try:
        display_restaurants(asyncio.run(_list()))
    except StarlistError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


@main.command()
@config_option
@click.option("--port", default=8000, help="Port to serve on.")
@click.option("--host", default="127.0.0.1", help="Host to bind to.")
def serve(config_file: str | None, port: int, host: str) -> None:
    """Serve the starred-restaurants API."""
    import uvicorn

    from starlist.web.app import create_app

    app = create_app(config=_load(config_file))
    console.print(f"[bold green]Starlist API[/bold green] -> http://{host}:{port}/api/starred-restaurants/")
    uvicorn.run(app, host=host, port=port, log_level="info")
