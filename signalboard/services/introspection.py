"""Read-only views over a bus's handler map for debugging tools."""

from __future__ import annotations

from typing import Any, Callable, Hashable

from signalboard.domain.bus import WILDCARD, HandlerMap
from signalboard.domain.models import HandlerSummary, RegistrySnapshot

WILDCARD_LABEL = "<wildcard>"


def describe_handler(handler: Callable) -> str:
    """Return a readable name for *handler*.

    Functions and bound methods use their qualified name; other callables
    (partials, instances with ``__call__``) fall back to their class name.
    """
    name = getattr(handler, "__qualname__", None)
    if name is None:
        return type(handler).__qualname__
    module = getattr(handler, "__module__", None)
    return f"{module}.{name}" if module else name


def event_type_label(event_type: Hashable) -> str:
    """Label used to address *event_type* in summaries and the inspector.

    Strings are their own label, classes use ``module.qualname`` and other
    keys their ``repr``. Distinct keys may still share a label (``7`` and
    ``"7"``); ``key_kind`` on the summary tells them apart.
    """
    if event_type is WILDCARD:
        return WILDCARD_LABEL
    if isinstance(event_type, str):
        return event_type
    if isinstance(event_type, type):
        return f"{event_type.__module__}.{event_type.__qualname__}"
    return repr(event_type)


def key_kind(event_type: Hashable) -> str:
    if event_type is WILDCARD:
        return "wildcard"
    if isinstance(event_type, type):
        return "class"
    return type(event_type).__qualname__


def _summary(event_type: Any, handler_list: list[Callable]) -> HandlerSummary:
    return HandlerSummary(
        event_type=event_type_label(event_type),
        key_kind=key_kind(event_type),
        is_wildcard=event_type is WILDCARD,
        handler_count=len(handler_list),
        handlers=[describe_handler(h) for h in handler_list],
    )


def summarize(handlers: HandlerMap) -> RegistrySnapshot:
    """Summarize every key in *handlers*, including cleared (empty) ones.

    Key order follows the map and carries no meaning.
    """
    summaries = [
        _summary(event_type, list(handler_list))
        for event_type, handler_list in list(handlers.items())
    ]
    return RegistrySnapshot(
        event_types=summaries,
        total_handlers=sum(s.handler_count for s in summaries),
    )


def find_summaries(handlers: HandlerMap, label: str) -> list[HandlerSummary]:
    """Return a summary for every key whose label is *label*."""
    return [
        _summary(event_type, list(handler_list))
        for event_type, handler_list in list(handlers.items())
        if event_type_label(event_type) == label
    ]
