# emilio/api/shell.py
"""
Public API for the terminal output components.
"""
from emilio.core.registry import registry


def get_terminal_formatter():
    """Get the terminal formatter instance."""
    from emilio.components.shell.formatter import TerminalFormatter, terminal_formatter
    return registry.get_or_create("terminal_formatter", TerminalFormatter, factory=lambda: terminal_formatter)
