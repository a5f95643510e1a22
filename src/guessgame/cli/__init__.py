"""CLI commands using Typer."""

import typer

from guessgame.cli.categories import app as categories_app
from guessgame.cli.db import app as db_app
from guessgame.cli.play import play
from guessgame.cli.questions import app as questions_app

app = typer.Typer(name="guessgame", help="Guess Game CLI")

# Register sub-apps
app.add_typer(db_app, name="db")
app.add_typer(categories_app, name="categories")
app.add_typer(questions_app, name="questions")
app.command("play")(play)


@app.command()
def version():
    """Show version information."""
    from guessgame import __version__

    typer.echo(f"Guess Game v{__version__}")


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind to"),
    port: int = typer.Option(8000, help="Port to bind to"),
    reload: bool = typer.Option(False, help="Enable auto-reload"),
):
    """Run the API server."""
    import uvicorn

    from guessgame.logging import get_uvicorn_log_config, setup_logging

    setup_logging()
    uvicorn.run(
        "guessgame.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=get_uvicorn_log_config(),
    )


if __name__ == "__main__":
    app()
