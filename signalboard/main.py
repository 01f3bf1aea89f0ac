"""FastAPI application: read-only inspector for an in-process event bus."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from signalboard.domain.bus import EventBus
from signalboard.domain.models import HandlerSummary, RegistrySnapshot
from signalboard.services.introspection import find_summaries, summarize


def create_app(bus: EventBus) -> FastAPI:
    """Build an inspector app over *bus*. Nothing here mutates the bus.

    Routes are ``async`` so the map is read on the event-loop thread rather
    than in FastAPI's threadpool; the bus itself is not thread-safe.
    """
    inspector = FastAPI(title="Event Bus Inspector")

    @inspector.get("/registry", response_model=RegistrySnapshot)
    async def get_registry() -> RegistrySnapshot:
        """Return every registered event type with its handlers."""
        return summarize(bus.handlers)

    @inspector.get("/registry/{event_type}", response_model=HandlerSummary)
    async def get_event_type(event_type: str) -> HandlerSummary:
        matches = find_summaries(bus.handlers, event_type)
        if not matches:
            raise HTTPException(status_code=404, detail="Event type not registered")
        if len(matches) > 1:
            raise HTTPException(
                status_code=409,
                detail=f"Label {event_type!r} matches {len(matches)} event types",
            )
        return matches[0]

    return inspector


# ── Singletons (created at import time for simplicity) ────────────────
# Applications that want the default ``app`` to show their handlers
# subscribe through ``signalboard.main.event_bus``.
event_bus = EventBus()
app = create_app(event_bus)
