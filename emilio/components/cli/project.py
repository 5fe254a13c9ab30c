# emilio/components/cli/project.py
"""
Commands that work on a saved model response: parse, show, preview, export.
"""
import asyncio
import webbrowser
from pathlib import Path
from typing import Optional

import typer

from emilio.api.preview import get_export_archive_func, get_preview_server
from emilio.api.shell import get_terminal_formatter
from emilio.components.cli.main import app, console, fail
from emilio.components.generation.errors import EmptyResultFailure
from emilio.components.generation.models import StructuredDocument
from emilio.components.generation.parser import build_document
from emilio.components.generation.selection import select_file
from emilio.config import config_manager
from emilio.utils.logging import get_logger

logger = get_logger(__name__)

RESPONSE_ARGUMENT = typer.Argument(
    ..., exists=True, dir_okay=False, readable=True, help="File holding a saved model response"
)


def load_document(response_file: Path) -> StructuredDocument:
    """Read and decompose a saved response, exiting on an empty result."""
    text = response_file.read_text(encoding="utf-8")
    try:
        return build_document(text)
    except EmptyResultFailure as e:
        fail(str(e), title="Generation Failed")


async def serve_preview(document: StructuredDocument, host: Optional[str], port: Optional[int], open_browser: bool) -> None:
    """Serve one document until interrupted."""
    server = get_preview_server(host=host, port=port)
    async with server:
        preview = server.update(document)
        if not preview.has_entry:
            console.print("[yellow]No index.html in this project; the preview shows a placeholder.[/yellow]")
        get_terminal_formatter().print_success(f"Preview running at {server.url} (Ctrl+C to stop)")
        if open_browser:
            webbrowser.open(server.url)
        await asyncio.Event().wait()


def run_preview(document: StructuredDocument, host: Optional[str], port: Optional[int], open_browser: bool) -> None:
    try:
        asyncio.run(serve_preview(document, host, port, open_browser))
    except KeyboardInterrupt:
        console.print("Preview stopped.")


def export_document(document: StructuredDocument, output: Optional[Path]) -> Path:
    destination = output or config_manager.config.user.output_dir
    path = get_export_archive_func()(document.files, destination)
    get_terminal_formatter().print_success(f"Exported {len(document.files)} files to {path}")
    return path


@app.command()
def parse(
    response_file: Path = RESPONSE_ARGUMENT,
    as_json: bool = typer.Option(False, "--json", help="Print the structured document as JSON"),
):
    """Decompose a saved response and summarize it."""
    document = load_document(response_file)
    if as_json:
        typer.echo(document.model_dump_json(indent=2))
        return
    get_terminal_formatter().print_summary(document)


@app.command()
def show(
    response_file: Path = RESPONSE_ARGUMENT,
    file_name: Optional[str] = typer.Option(None, "--file", "-f", help="File to display (default: index.html or the first file)"),
    notes: bool = typer.Option(False, "--notes", "-n", help="Show the header and notes instead of code"),
):
    """Show one generated file, or the notes."""
    document = load_document(response_file)
    formatter = get_terminal_formatter()

    if notes:
        formatter.print_notes(document)
        return

    code_file = select_file(document.files, file_name)
    if code_file is None:
        names = ", ".join(f.name for f in document.files)
        fail(f"No file named '{file_name}'. Available files: {names}")
    formatter.print_file(code_file)


@app.command()
def preview(
    response_file: Path = RESPONSE_ARGUMENT,
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind the preview server to"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port for the preview server"),
    no_browser: bool = typer.Option(False, "--no-browser", help="Do not open a browser"),
):
    """Serve a saved response in a sandboxed live preview."""
    document = load_document(response_file)
    open_browser = config_manager.config.preview.open_browser and not no_browser
    run_preview(document, host, port, open_browser)


@app.command()
def export(
    response_file: Path = RESPONSE_ARGUMENT,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Directory or .zip path to write"),
):
    """Export the files of a saved response as a ZIP archive."""
    document = load_document(response_file)
    export_document(document, output)
