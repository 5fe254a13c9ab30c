# emilio/api/generation.py
"""
Public API for the generation components.
"""
from typing import Callable, Type

from emilio.core.registry import registry


def get_generation_session():
    """Get the generation session shared by the CLI commands."""
    from emilio.components.generation.engine import GenerationSession
    from emilio.api.ai import get_gemini_client
    return registry.get_or_create(
        "generation_session",
        GenerationSession,
        factory=lambda: GenerationSession(client_factory=get_gemini_client),
    )


def get_generation_request_class() -> Type:
    """Get the GenerationRequest class."""
    from emilio.components.generation.engine import GenerationRequest
    return GenerationRequest


def get_parse_response_func() -> Callable:
    """Get the parse_response function."""
    from emilio.components.generation.parser import parse_response
    return parse_response
