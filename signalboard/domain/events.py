"""Base class for typed events published through the bus."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainEvent(BaseModel):
    """Immutable event payload; its class doubles as the event type.

    Subscribe with the class and publish instances via
    ``EventBus.publish_event``.
    """

    model_config = ConfigDict(frozen=True)
