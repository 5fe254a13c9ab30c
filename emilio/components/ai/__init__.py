# emilio/components/ai/__init__.py
"""
AI components for Emilio CLI.

This package wraps the Gemini client, the prompt builder and image loading.
"""
from .client import GeminiClient, GeminiRequest, GeminiResponse
from .images import ImageInput, load_image
from .prompts import SYSTEM_PROMPT, build_generation_prompt, get_system_prompt

__all__ = [
    'GeminiClient', 'GeminiRequest', 'GeminiResponse',
    'ImageInput', 'load_image',
    'SYSTEM_PROMPT', 'build_generation_prompt', 'get_system_prompt',
]
