# tests/test_engine.py
"""Tests for the generation session."""
import asyncio

import pytest

from emilio.components.ai.client import GeminiResponse
from emilio.components.ai.prompts import SYSTEM_PROMPT
from emilio.components.generation.engine import GenerationRequest, GenerationSession, GenerationState
from emilio.components.generation.errors import (
    EmptyResultFailure,
    GenerationFailure,
    GenerationInProgressError,
)
from emilio.core.events import DOCUMENT_READY, GENERATION_FAILED, EventBus


class FakeClient:
    """Stands in for GeminiClient."""

    def __init__(self, text="", error=None, release=None):
        self.text = text
        self.error = error
        self.release = release
        self.requests = []

    async def generate_text(self, request):
        self.requests.append(request)
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return GeminiResponse(text=self.text, raw_response={})


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def events(bus):
    received = []

    def record(event_type, data):
        received.append((event_type, data))

    bus.subscribe(DOCUMENT_READY, record)
    bus.subscribe(GENERATION_FAILED, record)
    return received


def _session(client, bus):
    return GenerationSession(client_factory=lambda: client, bus=bus)


@pytest.mark.asyncio
async def test_successful_generation(full_response, bus, events):
    client = FakeClient(text=full_response)
    session = _session(client, bus)

    document = await session.generate(GenerationRequest(url="https://example.com", output_type="HTML + CSS + JS"))

    assert [f.name for f in document.files] == ["index.html", "style.css", "app.js"]
    assert session.state == GenerationState.READY
    assert session.document is document
    assert session.raw_response == full_response
    assert events == [(DOCUMENT_READY, {"document": document})]

    sent = client.requests[0]
    assert sent.system_instruction == SYSTEM_PROMPT
    assert sent.prompt == "Target Frontend Stack: HTML + CSS + JS\nSource URL: https://example.com"


@pytest.mark.asyncio
async def test_custom_system_prompt_is_sent(full_response, bus):
    client = FakeClient(text=full_response)

    await _session(client, bus).generate(GenerationRequest(url="https://example.com", system_prompt="Be brief."))

    assert client.requests[0].system_instruction == "Be brief."


@pytest.mark.asyncio
async def test_request_needs_image_or_url(bus):
    session = _session(FakeClient(), bus)

    with pytest.raises(ValueError):
        await session.generate(GenerationRequest(user_prompt="anything"))

    assert session.state == GenerationState.IDLE


@pytest.mark.asyncio
async def test_client_failure_is_wrapped(bus, events):
    cause = RuntimeError("Failed to generate text with Gemini API after 2 attempts: boom")
    session = _session(FakeClient(error=cause), bus)

    with pytest.raises(GenerationFailure) as excinfo:
        await session.generate(GenerationRequest(url="https://example.com"))

    assert excinfo.value.cause is cause
    assert session.state == GenerationState.FAILED
    assert session.can_submit
    assert session.document is None
    assert events[0][0] == GENERATION_FAILED


@pytest.mark.asyncio
async def test_client_construction_failure_is_wrapped(bus):
    def broken_factory():
        raise ValueError("Gemini API key is not configured.")

    session = GenerationSession(client_factory=broken_factory, bus=bus)

    with pytest.raises(GenerationFailure):
        await session.generate(GenerationRequest(url="https://example.com"))
    assert session.can_submit


@pytest.mark.asyncio
async def test_empty_result(no_code_response, bus, events):
    session = _session(FakeClient(text=no_code_response), bus)

    with pytest.raises(EmptyResultFailure):
        await session.generate(GenerationRequest(url="https://example.com"))

    assert session.state == GenerationState.FAILED
    assert session.document is None
    assert [event for event, _ in events] == [GENERATION_FAILED]


@pytest.mark.asyncio
async def test_overlapping_generation_is_refused(full_response, bus):
    release = asyncio.Event()
    session = _session(FakeClient(text=full_response, release=release), bus)
    request = GenerationRequest(url="https://example.com")

    first = asyncio.create_task(session.generate(request))
    await asyncio.sleep(0)

    assert session.state == GenerationState.GENERATING
    assert not session.can_submit
    with pytest.raises(GenerationInProgressError):
        await session.generate(request)

    release.set()
    document = await first
    assert document.has_files
    assert session.can_submit


@pytest.mark.asyncio
async def test_retry_after_failure(full_response, bus):
    client = FakeClient(text=full_response, error=RuntimeError("down"))
    session = _session(client, bus)
    request = GenerationRequest(url="https://example.com")

    with pytest.raises(GenerationFailure):
        await session.generate(request)

    client.error = None
    document = await session.generate(request)
    assert session.state == GenerationState.READY
    assert document.has_files


@pytest.mark.asyncio
async def test_load_saved_response(scenario_a_text, bus, events):
    session = _session(FakeClient(), bus)

    document = await session.load_response(scenario_a_text)

    assert document.files[0].name == "index.html"
    assert events[0][0] == DOCUMENT_READY
