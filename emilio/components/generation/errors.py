# emilio/components/generation/errors.py
"""
Exceptions raised while turning a request into a structured document.
"""
from typing import Optional


class GenerationError(Exception):
    """Base class for recoverable generation errors."""
    pass


class GenerationFailure(GenerationError):
    """The model call raised or returned nothing usable."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class EmptyResultFailure(GenerationError):
    """The model answered, but no code files could be extracted."""
    pass


class GenerationInProgressError(GenerationError):
    """A generation is already running for this session."""
    pass
