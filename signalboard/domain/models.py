"""Read models describing the contents of a handler map."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HandlerSummary(BaseModel):
    """Handlers registered under one event type, in invocation order."""

    event_type: str
    key_kind: str
    is_wildcard: bool = False
    handler_count: int = 0
    handlers: list[str] = Field(default_factory=list)


class RegistrySnapshot(BaseModel):
    event_types: list[HandlerSummary] = Field(default_factory=list)
    total_handlers: int = 0
