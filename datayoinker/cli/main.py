"""Main CLI application using Cyclopts."""

import sys

import cyclopts
import uvicorn
from pydantic import ValidationError as SettingsError
from rich.console import Console

from datayoinker import __version__
from datayoinker.config import Config

app = cyclopts.App(
    name="datayoinker",
    help="DataYoinker - publish and retrieve readings over plain HTTP",
)

console = Console(stderr=True)


@app.command
def serve(
    host: str | None = None,
    port: int | None = None,
) -> None:
    """Run the HTTP server in the foreground.

    Args:
        host: Host to bind to. Defaults to the configured server host.
        port: Port to listen on. Defaults to DATAYOINKER_PORT, or 3333.
    """
    try:
        config = Config()
    except SettingsError as e:
        console.print(f"[bold red]✗[/bold red] Invalid configuration:\n{e}")
        sys.exit(1)

    host = host or config.server.host
    port = port or config.server.port
    console.print(f"[bold green]✓[/bold green] Server starting on http://{host}:{port}")
    console.print(f"  [dim]Database:[/dim] {config.database.url}")

    uvicorn.run(
        "datayoinker.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        timeout_keep_alive=config.server.timeout_keep_alive,
        access_log=True,
        lifespan="on",  # A failed storage setup must stop the server
    )


@app.command
def version() -> None:
    """Print the installed version."""
    Console().print(f"datayoinker {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
