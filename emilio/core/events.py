# emilio/core/events.py
from typing import Dict, Any, Callable, List
import asyncio

from emilio.utils.logging import get_logger

# Published by the generation session once a document with files is ready
DOCUMENT_READY = "document_ready"
# Published when a generation attempt ends without a usable document
GENERATION_FAILED = "generation_failed"


class EventBus:
    """Central event bus for communication between the session and its views."""

    def __init__(self):
        self._handlers: Dict[str, List[Callable]] = {}
        self._logger = get_logger(__name__)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Subscribe to an event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)
        self._logger.debug(f"Handler subscribed to {event_type}")

    def unsubscribe(self, event_type: str, handler: Callable) -> None:
        """Unsubscribe from an event type."""
        if event_type in self._handlers and handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)
            self._logger.debug(f"Handler unsubscribed from {event_type}")

    async def publish(self, event_type: str, data: Dict[str, Any]) -> None:
        """Publish an event to all subscribers."""
        self._logger.debug(f"Publishing event: {event_type}")

        if event_type not in self._handlers:
            return

        tasks = []
        for handler in list(self._handlers[event_type]):
            if asyncio.iscoroutinefunction(handler):
                tasks.append(asyncio.create_task(handler(event_type, data)))
            else:
                handler(event_type, data)

        if tasks:
            results = await asyncio.gather(*tasks, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    self._logger.error(f"Handler for {event_type} failed: {result}")


# Global event bus instance
event_bus = EventBus()
