# emilio/components/cli/__init__.py
"""
CLI components for Emilio CLI.

This package provides the command-line interface: the main application with
its generation and project commands, plus the prompt subcommand group.
"""
from emilio.components.cli.main import app as main_app
from emilio.components.cli.prompt import app as prompt_app

# Registering the commands on the main app
from emilio.components.cli import generation, project  # noqa: F401

main_app.add_typer(prompt_app, name="prompt", help="View or customize the system prompt")

# Export the main app
app = main_app

__all__ = ['app']
