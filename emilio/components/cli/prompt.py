# emilio/components/cli/prompt.py
"""
Commands for viewing and replacing the system prompt.
"""
from pathlib import Path

import typer
from rich.markdown import Markdown
from rich.panel import Panel

from emilio.components.ai.prompts import get_system_prompt
from emilio.components.cli.main import console
from emilio.config import config_manager
from emilio.utils.logging import get_logger

app = typer.Typer(help="View or customize the system prompt")
logger = get_logger(__name__)


@app.command("show")
def show_prompt(
    raw: bool = typer.Option(False, "--raw", help="Print the prompt without Markdown rendering"),
):
    """Show the system prompt currently in use."""
    custom = config_manager.config.user.system_prompt
    text = get_system_prompt(custom)
    if raw:
        typer.echo(text)
        return
    title = "Custom System Prompt" if custom else "Built-in System Prompt"
    console.print(Panel(Markdown(text), title=title, expand=False))


@app.command("set")
def set_prompt(
    prompt_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="File holding the new system prompt"
    ),
):
    """Replace the system prompt with the contents of a file."""
    text = prompt_file.read_text(encoding="utf-8").strip()
    if not text:
        console.print("[red]The prompt file is empty.[/red]")
        raise typer.Exit(1)

    config_manager.config.user.system_prompt = text
    config_manager.save_config()
    logger.info(f"Custom system prompt set from {prompt_file}")
    console.print(
        "[green]Custom system prompt saved.[/green] "
        "Keep the '### 4.x' section headings so responses can still be decomposed."
    )


@app.command("reset")
def reset_prompt():
    """Go back to the built-in system prompt."""
    config_manager.config.user.system_prompt = None
    config_manager.save_config()
    console.print("[green]Using the built-in system prompt.[/green]")
