"""Commands for running the HTTP server."""

import typer
import uvicorn
from rich.panel import Panel

from storefront.runtime.context import get_config

from .utils import console


def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the Storefront API server."""
    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Starting Storefront API[/bold green] on {bind_host}:{bind_port}",
            border_style="green",
        )
    )
    uvicorn.run(
        "storefront.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,
    )
