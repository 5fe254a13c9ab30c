# emilio/components/cli/generation.py
"""
Generation commands for Emilio CLI: one-shot generation and the interactive shell.
"""
import asyncio
import webbrowser
from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel

from emilio.api.ai import get_image_loader
from emilio.api.generation import get_generation_request_class, get_generation_session
from emilio.api.preview import get_preview_server
from emilio.api.shell import get_terminal_formatter
from emilio.components.cli.main import app, console, fail
from emilio.components.cli.project import export_document, run_preview
from emilio.components.generation.errors import GenerationError
from emilio.components.generation.selection import select_file
from emilio.config import config_manager
from emilio.constants import DATABASE_TYPES, HISTORY_FILE, OUTPUT_TYPES, USER_PROMPT_MAX_LENGTH
from emilio.utils.logging import get_logger

logger = get_logger(__name__)

SHELL_HELP = """Type a prompt and press Enter to generate.
  /image PATH      use a screenshot or mockup
  /url URL         use a page to reproduce
  /clear           forget the image and URL
  /frontend NAME   set the frontend stack (see /stacks)
  /backend NAME    set the backend/database
  /stacks          list the selectable stacks
  /generate        generate again without a prompt
  /files           summarize the current project
  /show [NAME]     show a file (default: index.html or the first file)
  /notes           show the header and notes
  /export [PATH]   write the project as a ZIP archive
  /help            show this help
Type 'exit' or press Ctrl+D to exit."""


async def generate_with_spinner(session, request):
    """Run one generation while the loading timer is shown."""
    formatter = get_terminal_formatter()
    spinner = asyncio.create_task(formatter.display_loading_timer("Generating project..."))
    try:
        return await session.generate(request)
    finally:
        spinner.cancel()
        await asyncio.gather(spinner, return_exceptions=True)


def _check_prompt_length(user_prompt: Optional[str]) -> None:
    if user_prompt and len(user_prompt) > USER_PROMPT_MAX_LENGTH:
        console.print(
            f"[yellow]Prompt is longer than {USER_PROMPT_MAX_LENGTH} characters and will be truncated.[/yellow]"
        )


@app.command()
def generate(
    image: Optional[Path] = typer.Option(
        None, "--image", "-i", exists=True, dir_okay=False, readable=True, help="Screenshot or mockup (PNG, JPG, WEBP)"
    ),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="URL of a page to reproduce"),
    user_prompt: Optional[str] = typer.Option(None, "--prompt", "-p", help="Extra instructions (max 200 characters)"),
    frontend: Optional[str] = typer.Option(None, "--frontend", "-f", help="Frontend stack (see 'emilio stacks')"),
    backend: Optional[str] = typer.Option(None, "--backend", "-b", help="Backend/database (see 'emilio stacks')"),
    save_response: Optional[Path] = typer.Option(
        None, "--save-response", "-s", help="Write the raw model response to this file"
    ),
    export: bool = typer.Option(False, "--export", "-e", help="Export the project as a ZIP archive"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Directory or .zip path for --export"),
    preview: bool = typer.Option(False, "--preview", help="Serve the result in a live preview"),
):
    """Generate a project from an image and/or a URL."""
    if image is None and not url:
        raise typer.BadParameter("Provide --image or --url (or both).")

    user_config = config_manager.config.user
    _check_prompt_length(user_prompt)

    try:
        request = get_generation_request_class()(
            output_type=frontend or user_config.default_frontend,
            database_type=backend or user_config.default_backend,
            user_prompt=user_prompt,
            url=url,
            image=get_image_loader()(image) if image is not None else None,
            system_prompt=user_config.system_prompt,
        )
    except ValueError as e:
        fail(str(e))

    session = get_generation_session()
    try:
        document = asyncio.run(generate_with_spinner(session, request))
    except GenerationError as e:
        fail(str(e), title="Generation Failed")
    except ValueError as e:
        fail(str(e))

    if save_response:
        save_response.parent.mkdir(parents=True, exist_ok=True)
        save_response.write_text(session.raw_response, encoding="utf-8")
        console.print(f"Response saved to {save_response}")

    get_terminal_formatter().print_summary(document)

    if export:
        export_document(document, output)

    if preview:
        run_preview(document, None, None, config_manager.config.preview.open_browser)


class InteractiveShell:
    """Prompt loop that regenerates into one session and one preview server."""

    def __init__(self, session, server, formatter):
        self.session = session
        self.server = server
        self.formatter = formatter
        user_config = config_manager.config.user
        self.request = get_generation_request_class()(
            output_type=user_config.default_frontend,
            database_type=user_config.default_backend,
            system_prompt=user_config.system_prompt,
        )

    async def submit(self, user_prompt: Optional[str]) -> None:
        """Generate with the current options; failures keep the shell usable."""
        _check_prompt_length(user_prompt)
        request = self.request.model_copy(update={"user_prompt": user_prompt})
        try:
            document = await generate_with_spinner(self.session, request)
        except (GenerationError, ValueError) as e:
            self.formatter.print_error(str(e), title="Generation Failed")
            return

        self.formatter.print_summary(document)
        self.formatter.print_success(f"Preview updated at {self.server.url}")

    async def handle_command(self, line: str) -> None:
        command, _, argument = line[1:].partition(" ")
        argument = argument.strip()
        document = self.session.document

        if command == "help":
            console.print(SHELL_HELP)
        elif command == "image":
            try:
                image = get_image_loader()(argument)
            except (ValueError, OSError) as e:
                self.formatter.print_error(str(e))
                return
            self.request = self.request.model_copy(update={"image": image})
            console.print(f"Image set ({image.width}x{image.height}).")
        elif command == "url":
            self.request = self.request.model_copy(update={"url": argument or None})
            console.print(f"URL set to {argument}." if argument else "URL cleared.")
        elif command == "clear":
            self.request = self.request.model_copy(update={"image": None, "url": None})
            console.print("Image and URL cleared.")
        elif command == "frontend":
            self._set_stack("output_type", argument, OUTPUT_TYPES)
        elif command == "backend":
            self._set_stack("database_type", argument, DATABASE_TYPES)
        elif command == "stacks":
            self.formatter.print_stacks(OUTPUT_TYPES, DATABASE_TYPES)
        elif command == "generate":
            await self.submit(None)
        elif command in ("files", "show", "notes", "export") and document is None:
            self.formatter.print_error("Nothing generated yet.")
        elif command == "files":
            self.formatter.print_summary(document)
        elif command == "show":
            code_file = select_file(document.files, argument or None)
            if code_file is None:
                self.formatter.print_error(f"No file named '{argument}'.")
            else:
                self.formatter.print_file(code_file)
        elif command == "notes":
            self.formatter.print_notes(document)
        elif command == "export":
            export_document(document, Path(argument) if argument else None)
        else:
            self.formatter.print_error(f"Unknown command '/{command}'. Type /help for the list.")

    def _set_stack(self, field: str, value: str, choices: list) -> None:
        if value not in choices:
            self.formatter.print_error(f"'{value}' is not one of: {', '.join(choices)}")
            return
        self.request = self.request.model_copy(update={field: value})
        console.print(f"{field.replace('_', ' ').capitalize()} set to {value}.")

    async def run(self, prompt_session) -> None:
        while True:
            try:
                text = await prompt_session.prompt_async("emilio> ")
            except KeyboardInterrupt:
                continue
            except EOFError:
                break

            text = text.strip()
            if not text:
                continue
            if text.lower() in ("exit", "quit", "bye"):
                break

            if text.startswith("/"):
                await self.handle_command(text)
            else:
                await self.submit(text)

            console.print("─" * console.width)


async def _run_shell(host: Optional[str], port: Optional[int], open_browser: bool) -> None:
    from prompt_toolkit import PromptSession
    from prompt_toolkit.history import FileHistory
    from prompt_toolkit.auto_suggest import AutoSuggestFromHistory

    HISTORY_FILE.parent.mkdir(parents=True, exist_ok=True)
    prompt_session = PromptSession(
        history=FileHistory(str(HISTORY_FILE)),
        auto_suggest=AutoSuggestFromHistory(),
    )

    server = get_preview_server(host=host, port=port)
    async with server:
        # Until the first generation the frame shows the placeholder page
        server.update(None)
        console.print(Panel(
            f"Welcome to Emilio's interactive shell!\n"
            f"Live preview: {server.url}\n\n{SHELL_HELP}",
            title="Emilio Interactive Shell",
            expand=False,
        ))
        if open_browser:
            webbrowser.open(server.url)

        shell_loop = InteractiveShell(get_generation_session(), server, get_terminal_formatter())
        await shell_loop.run(prompt_session)

    console.print("Goodbye!")


@app.command()
def shell(
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind the preview server to"),
    port: Optional[int] = typer.Option(None, "--port", help="Port for the preview server"),
    no_browser: bool = typer.Option(False, "--no-browser", help="Do not open a browser"),
):
    """Generate interactively with a live preview of the latest result."""
    open_browser = config_manager.config.preview.open_browser and not no_browser
    asyncio.run(_run_shell(host, port, open_browser))
