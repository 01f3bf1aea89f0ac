"""Simple synchronous in-process event bus."""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Union, overload

logger = logging.getLogger(__name__)


class _Wildcard:
    """Sentinel key for handlers that receive every event."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "'*'"

    def __reduce__(self) -> str:
        # Copies and unpickled maps resolve back to the module singleton.
        return "WILDCARD"


WILDCARD = _Wildcard()

EventType = Hashable
Handler = Callable[[Any], None]
WildcardHandler = Callable[[Hashable, Any], None]
HandlerMap = dict[Hashable, list[Union[Handler, WildcardHandler]]]


class EventBus:
    """Publish/subscribe bus keyed by event type.

    Handlers are called synchronously in registration order. Handlers
    subscribed under ``WILDCARD`` are called after the type-specific ones,
    with ``(event_type, payload)``.

    The backing map is available as ``handlers``. A map passed in is used
    as-is, so several buses built on the same dict share their handlers.

    Not thread-safe: callers sharing a bus across threads must serialise
    access themselves.
    """

    def __init__(self, handlers: HandlerMap | None = None) -> None:
        self.handlers: HandlerMap = handlers if handlers is not None else {}

    @overload
    def subscribe(self, event_type: _Wildcard, handler: WildcardHandler) -> None: ...

    @overload
    def subscribe(self, event_type: EventType, handler: Handler) -> None: ...

    def subscribe(self, event_type, handler):
        handler_list = self.handlers.get(event_type)
        if handler_list is None:
            self.handlers[event_type] = [handler]
        else:
            handler_list.append(handler)
        logger.debug("Subscribed %r to %r", handler, event_type)

    @overload
    def unsubscribe(
        self, event_type: _Wildcard, handler: WildcardHandler | None = None
    ) -> None: ...

    @overload
    def unsubscribe(self, event_type: EventType, handler: Handler | None = None) -> None: ...

    def unsubscribe(self, event_type, handler=None):
        """Remove one occurrence of *handler*, or every handler when omitted.

        Clearing leaves the event type mapped to an empty list. Unknown
        event types and handlers that are not registered are ignored.
        """
        handler_list = self.handlers.get(event_type)
        if handler_list is None:
            return

        if handler is None:
            self.handlers[event_type] = []
            logger.debug("Cleared handlers for %r", event_type)
            return

        try:
            handler_list.remove(handler)
        except ValueError:
            logger.debug("Handler %r not subscribed to %r", handler, event_type)
        else:
            logger.debug("Unsubscribed %r from %r", handler, event_type)

    def publish(self, event_type: EventType, payload: Any = None) -> None:
        # Each list is copied before its loop, so (un)subscribes made by a
        # handler only take effect from the next publish.
        typed = list(self.handlers.get(event_type, ()))
        logger.debug("Publishing %r to %d handler(s)", event_type, len(typed))
        for handler in typed:
            handler(payload)

        wildcards = list(self.handlers.get(WILDCARD, ()))
        for handler in wildcards:
            handler(event_type, payload)

    def publish_event(self, event: Any) -> None:
        """Publish *event* under its own class."""
        self.publish(type(event), event)
