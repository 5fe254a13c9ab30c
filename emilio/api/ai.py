# emilio/api/ai.py
"""
Public API for the AI components.
"""
from typing import Callable, Type

from emilio.core.registry import registry


def get_gemini_client():
    """
    Get the Gemini API client instance.

    The client is created on first use, so a missing API key only fails the
    commands that actually talk to the model.
    """
    from emilio.components.ai.client import GeminiClient
    return registry.get_or_create("gemini_client", GeminiClient)


def get_image_loader() -> Callable:
    """Get the load_image function."""
    from emilio.components.ai.images import load_image
    return load_image


def get_image_input_class() -> Type:
    """Get the ImageInput class."""
    from emilio.components.ai.images import ImageInput
    return ImageInput
