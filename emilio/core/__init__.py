# emilio/core/__init__.py
"""
Core infrastructure for Emilio CLI.

This module provides the service registry and the event bus shared by all components.
"""
from emilio.core.registry import registry
from emilio.core.events import event_bus

__all__ = ['registry', 'event_bus']
