# emilio/components/shell/__init__.py
"""Terminal output for Emilio CLI."""
from .formatter import TerminalFormatter, terminal_formatter, COLOR_PALETTE

__all__ = ['TerminalFormatter', 'terminal_formatter', 'COLOR_PALETTE']
