# emilio/components/generation/selection.py
"""
File selection policies shared by the preview and the code view.
"""
from typing import Optional, Sequence

from emilio.components.generation.models import CodeFile
from emilio.constants import ENTRY_FILE_NAME


def select_entry_file(files: Sequence[CodeFile]) -> Optional[CodeFile]:
    """The first file named exactly index.html, if any."""
    for code_file in files:
        if code_file.name == ENTRY_FILE_NAME:
            return code_file
    return None


def select_default_file(files: Sequence[CodeFile]) -> Optional[CodeFile]:
    """The file shown first in the code view: the entry file, else the first file."""
    entry = select_entry_file(files)
    if entry is not None:
        return entry
    return files[0] if files else None


def select_file(files: Sequence[CodeFile], name: Optional[str] = None) -> Optional[CodeFile]:
    """
    Pick a file by name, falling back to the default policy when no name is given.

    Duplicate names resolve to the first match.
    """
    if name is None:
        return select_default_file(files)
    for code_file in files:
        if code_file.name == name:
            return code_file
    return None
