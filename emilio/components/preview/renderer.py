# emilio/components/preview/renderer.py
"""
Preview rendering for generated projects.

The renderer materializes the document's files, picks the entry document
and rewrites its local references to the asset handles.
"""
from typing import Optional

from pydantic import BaseModel, Field

from emilio.components.generation.models import StructuredDocument
from emilio.components.generation.selection import select_entry_file
from emilio.components.preview.assets import AssetArena
from emilio.components.preview.rewriter import rewrite_references
from emilio.constants import ENTRY_FILE_NAME
from emilio.utils.logging import get_logger

logger = get_logger(__name__)

PLACEHOLDER_HTML = f"<h2>No {ENTRY_FILE_NAME} found to preview.</h2>"


class RenderedPreview(BaseModel):
    """The document shown inside the sandboxed frame."""
    html: str = Field(PLACEHOLDER_HTML, description="Entry document with rewritten references")
    revision: int = Field(0, description="Incremented on every render")
    has_entry: bool = Field(False, description="Whether an entry file was found")


class PreviewRenderer:
    """Keeps the latest rendered preview and the arena its handles live in."""

    def __init__(self, arena: Optional[AssetArena] = None):
        self.arena = arena or AssetArena()
        self.current = RenderedPreview()

    def render(self, document: Optional[StructuredDocument]) -> RenderedPreview:
        """
        Render a document for the preview frame.

        Never raises: a document without an entry file renders the
        placeholder page, and so does no document at all.
        """
        files = document.files if document is not None else []
        handles = self.arena.materialize(files)
        entry = select_entry_file(files)

        if entry is None:
            logger.debug(f"No {ENTRY_FILE_NAME} in document, rendering placeholder")
            html = PLACEHOLDER_HTML
        else:
            html = rewrite_references(entry.content, handles)

        self.current = RenderedPreview(
            html=html,
            revision=self.current.revision + 1,
            has_entry=entry is not None,
        )
        logger.debug(f"Rendered preview revision {self.current.revision}")
        return self.current

    def close(self) -> None:
        """Revoke every asset handle."""
        self.arena.revoke_all()
