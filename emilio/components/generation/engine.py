# emilio/components/generation/engine.py
"""
Generation session for Emilio CLI.

A session sends one request at a time to the model, decomposes the answer
and announces the resulting document on the event bus. Overlapping requests
are refused rather than queued; a failed request leaves the session ready
for the next one.
"""
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, Field

from emilio.components.ai.client import GeminiClient, GeminiRequest
from emilio.components.ai.images import ImageInput
from emilio.components.ai.prompts import build_generation_prompt, get_system_prompt
from emilio.components.generation.errors import (
    EmptyResultFailure,
    GenerationFailure,
    GenerationInProgressError,
)
from emilio.components.generation.models import StructuredDocument
from emilio.components.generation.parser import parse_response
from emilio.constants import DATABASE_TYPES, OUTPUT_TYPES
from emilio.core.events import DOCUMENT_READY, GENERATION_FAILED, EventBus, event_bus
from emilio.utils.logging import get_logger

logger = get_logger(__name__)


class GenerationState(str, Enum):
    """Where a session is in its request cycle."""
    IDLE = "idle"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"


class GenerationRequest(BaseModel):
    """Everything the user supplies for one generation."""
    output_type: str = Field(OUTPUT_TYPES[0], description="Target frontend stack")
    database_type: str = Field(DATABASE_TYPES[0], description="Target backend/database")
    user_prompt: Optional[str] = Field(None, description="Free-form instructions")
    url: Optional[str] = Field(None, description="URL of the page to reproduce")
    image: Optional[ImageInput] = Field(None, description="Reference screenshot or mockup")
    system_prompt: Optional[str] = Field(None, description="Custom system prompt")


class GenerationSession:
    """Runs generation requests and keeps the latest successful document."""

    def __init__(
        self,
        client_factory: Optional[Callable[[], GeminiClient]] = None,
        bus: Optional[EventBus] = None,
    ):
        self._client_factory = client_factory or GeminiClient
        self._client: Optional[GeminiClient] = None
        self._bus = bus or event_bus
        self.state = GenerationState.IDLE
        self.document: Optional[StructuredDocument] = None
        self.raw_response: Optional[str] = None
        self.last_error: Optional[Exception] = None

    @property
    def can_submit(self) -> bool:
        """A new request is accepted unless one is outstanding."""
        return self.state != GenerationState.GENERATING

    def _get_client(self) -> GeminiClient:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    async def generate(self, request: GenerationRequest) -> StructuredDocument:
        """
        Ask the model for a project and decompose its answer.

        Args:
            request: The generation request

        Returns:
            The structured document (always with at least one file)

        Raises:
            ValueError: If the request has neither an image nor a URL, or names an unknown stack
            GenerationInProgressError: If another request is still running
            GenerationFailure: If the model call failed
            EmptyResultFailure: If the answer contained no code files
        """
        if not self.can_submit:
            raise GenerationInProgressError("A generation is already in progress.")
        if request.image is None and not request.url:
            raise ValueError("Provide an image or a URL to generate from.")

        prompt = build_generation_prompt(
            output_type=request.output_type,
            database_type=request.database_type,
            user_prompt=request.user_prompt,
            url=request.url,
        )

        self.state = GenerationState.GENERATING
        self.document = None
        self.last_error = None
        logger.info(
            "Generating project",
            extra={"frontend": request.output_type, "backend": request.database_type},
        )

        try:
            client = self._get_client()
            response = await client.generate_text(GeminiRequest(
                prompt=prompt,
                system_instruction=get_system_prompt(request.system_prompt),
                image=request.image,
            ))
        except Exception as e:
            logger.error(f"Error generating code: {e}")
            failure = GenerationFailure(f"Error generating code: {e}", cause=e)
            await self._fail(failure)
            raise failure from e

        return await self.load_response(response.text)

    async def load_response(self, response_text: str) -> StructuredDocument:
        """
        Decompose a raw response and make it the session's document.

        Also used to reopen a response saved from an earlier run.

        Raises:
            EmptyResultFailure: If the response contains no code files
        """
        self.raw_response = response_text
        document = parse_response(response_text)

        if not document.has_files:
            logger.error("No code blocks found in the response.")
            failure = EmptyResultFailure("No code blocks found in the response.")
            await self._fail(failure)
            raise failure

        self.document = document
        self.state = GenerationState.READY
        logger.info(f"Generated {len(document.files)} files")
        await self._bus.publish(DOCUMENT_READY, {"document": document})
        return document

    async def _fail(self, error: Exception) -> None:
        self.state = GenerationState.FAILED
        self.last_error = error
        await self._bus.publish(GENERATION_FAILED, {"error": error})
