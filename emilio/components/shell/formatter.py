# emilio/components/shell/formatter.py
"""
Terminal formatter for Emilio CLI.

Renders the three views of a generated project (summary, code and notes)
along with the shared error panel, using rich with one consistent palette.
"""
import asyncio
import time
from typing import List, Optional

from rich import box
from rich.console import Console, Group
from rich.live import Live
from rich.markdown import Markdown
from rich.panel import Panel
from rich.spinner import Spinner
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from emilio.components.generation.models import CodeFile, StructuredDocument
from emilio.components.generation.selection import select_entry_file
from emilio.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BOX = box.ROUNDED

COLOR_PALETTE = {
    "border": "#ff0055",           # Red border for all panels
    "text": "#00c8ff",             # Blue text for panel content
    "success": "#00ff99",
    "warning": "#ffcc00",
    "error": "#ff3355",
    "info": "#00c8ff",
    "subtle": "#6c7280",
}

ASCII_DECORATIONS = {
    "files": "◈",
    "code": "⚡",
    "notes": "✎",
    "error": "⚠",
    "success": "✓",
}


class TerminalFormatter:
    """Rich-based rendering of documents and status messages."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()
        self._logger = logger

    @property
    def console(self) -> Console:
        return self._console

    def _title(self, text: str, decoration: str, color: str) -> str:
        mark = ASCII_DECORATIONS[decoration]
        return f"[bold {color}]{mark} {text} {mark}[/bold {color}]"

    def print_summary(self, document: StructuredDocument) -> None:
        """
        Display the header, the file list and the project structure.

        Args:
            document: The document to summarize
        """
        if document.header:
            self._console.print(Panel(
                Markdown(document.header),
                title=self._title("Project", "notes", COLOR_PALETTE["text"]),
                border_style=COLOR_PALETTE["border"],
                box=DEFAULT_BOX,
                padding=(1, 2),
            ))

        entry = select_entry_file(document.files)
        table = Table(
            title=f"{ASCII_DECORATIONS['files']} Files",
            box=DEFAULT_BOX,
            border_style=COLOR_PALETTE["border"],
            header_style=f"bold {COLOR_PALETTE['text']}",
        )
        table.add_column("#", justify="right", style=COLOR_PALETTE["subtle"])
        table.add_column("Name", style=f"bold {COLOR_PALETTE['text']}")
        table.add_column("Language")
        table.add_column("Lines", justify="right")

        for index, code_file in enumerate(document.files, start=1):
            name = code_file.name
            if code_file is entry:
                name += " [green](entry)[/green]"
            table.add_row(str(index), name, code_file.lang, str(len(code_file.content.splitlines())))

        self._console.print("")
        self._console.print(table)

        if document.structure:
            self._console.print(Panel(
                Text(document.structure, style=COLOR_PALETTE["text"]),
                title=self._title("Project Structure", "files", COLOR_PALETTE["text"]),
                border_style=COLOR_PALETTE["border"],
                box=DEFAULT_BOX,
                expand=False,
                padding=(1, 2),
            ))

    def print_file(self, code_file: CodeFile) -> None:
        """Display one file with syntax highlighting by its language tag."""
        syntax = Syntax(
            code_file.content,
            code_file.lang,
            theme="monokai",
            line_numbers=True,
            word_wrap=True,
            background_color="default",
        )
        self._console.print("")
        self._console.print(Panel(
            syntax,
            title=self._title(code_file.name, "code", COLOR_PALETTE["text"]),
            subtitle=f"[{COLOR_PALETTE['subtle']}]{code_file.lang}[/{COLOR_PALETTE['subtle']}]",
            border_style=COLOR_PALETTE["border"],
            box=DEFAULT_BOX,
            padding=(0, 1),
        ))

    def print_notes(self, document: StructuredDocument) -> None:
        """Display the header and the notes as Markdown."""
        self._console.print("")
        self._console.print(Panel(
            Markdown(document.notes_markdown()),
            title=self._title("Notes", "notes", COLOR_PALETTE["text"]),
            border_style=COLOR_PALETTE["border"],
            box=DEFAULT_BOX,
            padding=(1, 2),
        ))

    def print_stacks(self, output_types: List[str], database_types: List[str]) -> None:
        """List the selectable frontend and backend stacks."""
        table = Table(box=DEFAULT_BOX, border_style=COLOR_PALETTE["border"])
        table.add_column("Frontend", style=COLOR_PALETTE["text"])
        table.add_column("Backend / Database", style=COLOR_PALETTE["text"])
        for index in range(max(len(output_types), len(database_types))):
            table.add_row(
                output_types[index] if index < len(output_types) else "",
                database_types[index] if index < len(database_types) else "",
            )
        self._console.print(table)

    def print_error(self, message: str, title: str = "Error") -> None:
        """The single error panel shown for every failed generation."""
        self._console.print("")
        self._console.print(Panel(
            Text(message, style=COLOR_PALETTE["error"]),
            title=self._title(title, "error", COLOR_PALETTE["error"]),
            border_style=COLOR_PALETTE["error"],
            box=DEFAULT_BOX,
            expand=False,
            padding=(1, 2),
        ))

    def print_success(self, message: str) -> None:
        self._console.print(
            f"[bold {COLOR_PALETTE['success']}]{ASCII_DECORATIONS['success']}[/bold {COLOR_PALETTE['success']}] {message}"
        )

    async def display_loading_timer(self, message: str) -> None:
        """
        Show a spinner with elapsed time until cancelled.

        Args:
            message: The message shown next to the spinner
        """
        start_time = time.time()
        spinner = Spinner("dots", style=COLOR_PALETTE["text"])

        def get_layout():
            elapsed = time.time() - start_time
            status = Text()
            status.append(f"{elapsed:.2f}s", style=f"bold {COLOR_PALETTE['text']}")
            status.append(f" - {message}")
            return Panel(
                Group(spinner, status),
                title=self._title("Emilio Generating", "code", COLOR_PALETTE["text"]),
                border_style=COLOR_PALETTE["border"],
                box=DEFAULT_BOX,
                padding=(1, 2),
            )

        try:
            with Live(get_layout(), refresh_per_second=20, console=self._console, transient=True) as live:
                while True:
                    await asyncio.sleep(0.05)
                    live.update(get_layout())
        except asyncio.CancelledError:
            self._logger.debug("Loading display cancelled")


# Global formatter instance
terminal_formatter = TerminalFormatter()
