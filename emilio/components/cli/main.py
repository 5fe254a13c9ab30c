# emilio/components/cli/main.py
"""
Main command-line interface for Emilio CLI.
"""

import typer
from rich.console import Console

from emilio import __version__
from emilio.config import config_manager
from emilio.api.shell import get_terminal_formatter
from emilio.constants import DATABASE_TYPES, OUTPUT_TYPES
from emilio.utils.logging import setup_logging, get_logger

# Create the app
app = typer.Typer(help="Emilio: turn a screenshot, URL or prompt into a runnable project")
logger = get_logger(__name__)
console = Console()


def version_callback(value: bool):
    """Display version information and exit."""
    if value:
        console.print(f"Emilio CLI version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    debug: bool = typer.Option(
        False, "--debug", "-d", help="Enable debug mode"
    ),
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Emilio: turn a screenshot, URL or prompt into a runnable project"""
    debug = debug or config_manager.config.debug
    config_manager.config.debug = debug
    setup_logging(debug=debug)


@app.command()
def init():
    """Initialize Emilio CLI with configuration."""
    console.print("Initializing Emilio CLI...")
    config = config_manager.config

    if config.api.gemini_api_key:
        console.print("[green]API key already configured.[/green]")
    else:
        console.print("A Google Gemini API key is required to generate projects.")
        config.api.gemini_api_key = typer.prompt("Enter your Gemini API key", hide_input=True)

    config.user.default_frontend = _prompt_choice(
        "Default frontend stack", OUTPUT_TYPES, config.user.default_frontend
    )
    config.user.default_backend = _prompt_choice(
        "Default backend/database", DATABASE_TYPES, config.user.default_backend
    )

    if typer.confirm("Set a default directory for exported archives?", default=False):
        config.user.output_dir = typer.prompt("Enter the output directory")

    config.preview.open_browser = typer.confirm(
        "Open the preview in a browser automatically?", default=config.preview.open_browser
    )

    path = config_manager.save_config()

    console.print(f"[green]Configuration saved to {path}[/green]")
    console.print("\nEmilio CLI is now initialized. You can use the following commands:")
    console.print("  [blue]emilio generate --image shot.png[/blue] - Generate a project from a screenshot")
    console.print("  [blue]emilio shell[/blue] - Generate interactively with a live preview")
    console.print("  [blue]emilio --help[/blue] - Show help")


def _prompt_choice(label: str, choices: list, default: str) -> str:
    for index, choice in enumerate(choices, start=1):
        console.print(f"  {index}. {choice}")
    while True:
        answer = typer.prompt(f"{label} (number or name)", default=default)
        if answer in choices:
            return answer
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1]
        console.print(f"[red]'{answer}' is not one of the listed options.[/red]")


@app.command()
def stacks():
    """List the selectable frontend and backend stacks."""
    get_terminal_formatter().print_stacks(OUTPUT_TYPES, DATABASE_TYPES)


def fail(message: str, title: str = "Error", code: int = 1) -> None:
    """Show the error panel and exit with a non-zero status."""
    get_terminal_formatter().print_error(message, title=title)
    raise typer.Exit(code)
