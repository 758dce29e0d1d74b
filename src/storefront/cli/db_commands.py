"""Database management commands."""

import asyncio

import typer

from storefront.core.services import (
    DbManageService,
    DbSessionService,
    ProductSeeder,
    SeedError,
)
from storefront.runtime.context import get_config
from storefront.runtime.init_db import init_db

from .utils import console

db_app = typer.Typer(help="Database management commands", no_args_is_help=True)


@db_app.command(name="init")
def init_tables(
    drop: bool = typer.Option(False, "--drop", help="Drop existing tables first"),
) -> None:
    """Create the users and products tables."""
    init_db(drop=drop)
    console.print("[green]Database tables are ready[/green]")


@db_app.command(name="seed")
def seed_products(
    source_url: str | None = typer.Option(
        None, help="Catalog URL (defaults to config seed.source_url)"
    ),
) -> None:
    """Import the product catalog into an empty products table."""
    config = get_config()
    seeder = ProductSeeder(
        source_url or config.seed.source_url,
        timeout=config.seed.timeout_seconds,
    )

    database_service = DbSessionService()
    try:
        DbManageService(database_service.engine).create_all()
        with database_service.session_scope() as session:
            inserted = asyncio.run(seeder.seed(session))
    except SeedError as exc:
        console.print(f"[red]Seeding failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    finally:
        database_service.dispose()

    if inserted:
        console.print(f"[green]Inserted {inserted} products[/green]")
    else:
        console.print("[yellow]Products table already populated; nothing to do[/yellow]")
