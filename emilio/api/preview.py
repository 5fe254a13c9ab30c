# emilio/api/preview.py
"""
Public API for the preview and export components.
"""
from typing import Callable, Optional

from emilio.core.registry import registry


def get_preview_renderer():
    """Get the preview renderer instance."""
    from emilio.components.preview.renderer import PreviewRenderer
    return registry.get_or_create("preview_renderer", PreviewRenderer)


def get_preview_server(host: Optional[str] = None, port: Optional[int] = None):
    """
    Get the preview server, bound to the shared renderer.

    Args:
        host: Interface to bind; defaults to the configured preview host
        port: Port to bind; defaults to the configured preview port
    """
    from emilio.components.preview.server import PreviewServer
    from emilio.config import config_manager

    preview_config = config_manager.config.preview
    return registry.get_or_create(
        "preview_server",
        PreviewServer,
        factory=lambda: PreviewServer(
            renderer=get_preview_renderer(),
            host=host or preview_config.host,
            port=port or preview_config.port,
        ),
    )


def get_export_archive_func() -> Callable:
    """Get the export_archive function."""
    from emilio.components.export.archive import export_archive
    return export_archive
