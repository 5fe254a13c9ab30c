# emilio/api/__init__.py
"""
Public API for Emilio CLI.

Each sub-module gives lazy, registry-backed access to one category of
components, so commands never construct services themselves.
"""
from emilio.api import ai
from emilio.api import generation
from emilio.api import preview
from emilio.api import shell

__all__ = [
    'ai',
    'generation',
    'preview',
    'shell',
]
