# emilio/__init__.py
"""
Emilio CLI: turn a screenshot, URL or prompt into a runnable project with a live sandboxed preview.
"""

__version__ = '0.1.0'

from emilio.core.registry import registry


def init_application():
    """Register the long-lived components before the CLI runs."""
    from emilio.api.shell import get_terminal_formatter
    from emilio.api.generation import get_generation_session
    from emilio.api.preview import get_preview_renderer

    registry.register("terminal_formatter", get_terminal_formatter())
    registry.register("generation_session", get_generation_session())
    registry.register("preview_renderer", get_preview_renderer())

    from emilio.utils.logging import get_logger
    logger = get_logger(__name__)
    logger.debug("Application initialization completed")
