# emilio/components/preview/__init__.py
"""
Live preview for Emilio CLI.

Generated files are published as assets, the entry document is rewritten to
reference them, and a local server shows the result in a sandboxed frame.
"""
from .assets import AssetArena, MaterializedAsset, guess_mime_type
from .rewriter import rewrite_references
from .renderer import PLACEHOLDER_HTML, PreviewRenderer, RenderedPreview
from .server import PreviewServer

__all__ = [
    'AssetArena', 'MaterializedAsset', 'guess_mime_type',
    'rewrite_references',
    'PLACEHOLDER_HTML', 'PreviewRenderer', 'RenderedPreview',
    'PreviewServer',
]
