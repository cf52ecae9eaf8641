"""
Event dispatcher - priority-ordered publish/subscribe.

Listeners with a higher priority run first. Listeners sharing a priority
run in registration order. A listener can stop propagation so that
lower-priority listeners are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from ui_styles_layout_builder.constants import ErrorMessages, LayoutBuilderEvents

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class Event:
    """Base class for dispatched events."""

    def __init__(self) -> None:
        self._propagation_stopped = False

    def stop_propagation(self) -> None:
        """Prevent further listeners from being called."""
        self._propagation_stopped = True

    def is_propagation_stopped(self) -> bool:
        return self._propagation_stopped


@dataclass(frozen=True)
class Subscription:
    """Registration metadata for one subscriber method."""

    event: LayoutBuilderEvents
    method: str
    priority: int = 0


@runtime_checkable
class EventSubscriberInterface(Protocol):
    """An object that declares its own event subscriptions."""

    def get_subscribed_events(self) -> list[Subscription]: ...


def _event_key(event_name: str | LayoutBuilderEvents) -> LayoutBuilderEvents:
    """Normalize an event name to the enum member."""
    if isinstance(event_name, LayoutBuilderEvents):
        return event_name
    try:
        return LayoutBuilderEvents(event_name)
    except ValueError:
        raise ValueError(ErrorMessages.UNKNOWN_EVENT.format(event_name=event_name)) from None


class EventDispatcher:
    """
    Dispatches events to registered listeners in priority order.
    """

    def __init__(self) -> None:
        self._listeners: dict[LayoutBuilderEvents, list[tuple[int, int, Listener]]] = {}
        self._sequence = 0

    def add_listener(
        self,
        event_name: str | LayoutBuilderEvents,
        listener: Listener,
        priority: int = 0,
    ) -> None:
        """
        Register a listener for an event.

        Args:
            event_name: Event to listen for
            listener: Callable receiving the event
            priority: Higher priorities run earlier
        """
        key = _event_key(event_name)
        self._listeners.setdefault(key, []).append((priority, self._sequence, listener))
        self._sequence += 1
        logger.debug(f"Registered listener {listener!r} for {key.value} (priority {priority})")

    def remove_listener(self, event_name: str | LayoutBuilderEvents, listener: Listener) -> None:
        """Remove every registration of a listener for an event."""
        key = _event_key(event_name)
        self._listeners[key] = [
            entry for entry in self._listeners.get(key, []) if entry[2] != listener
        ]

    def add_subscriber(self, subscriber: EventSubscriberInterface) -> None:
        """
        Register all subscriptions declared by a subscriber.

        Args:
            subscriber: Object implementing get_subscribed_events()

        Raises:
            ValueError: If a subscription names a missing method
        """
        for subscription in subscriber.get_subscribed_events():
            method = getattr(subscriber, subscription.method, None)
            if not callable(method):
                raise ValueError(
                    ErrorMessages.MISSING_METHOD.format(
                        subscriber=type(subscriber).__name__,
                        method=subscription.method,
                    )
                )
            self.add_listener(subscription.event, method, subscription.priority)

    def get_listeners(self, event_name: str | LayoutBuilderEvents) -> list[Listener]:
        """
        Get listeners for an event in call order.

        Args:
            event_name: Event name

        Returns:
            Listeners sorted by priority (highest first)
        """
        entries = self._listeners.get(_event_key(event_name), [])
        ordered = sorted(entries, key=lambda entry: (-entry[0], entry[1]))
        return [listener for _, _, listener in ordered]

    def has_listeners(self, event_name: str | LayoutBuilderEvents) -> bool:
        """Check if any listener is registered for an event."""
        return bool(self._listeners.get(_event_key(event_name)))

    def dispatch(self, event: Event, event_name: str | LayoutBuilderEvents) -> Event:
        """
        Dispatch an event to its listeners.

        Args:
            event: Event object passed to each listener
            event_name: Event name

        Returns:
            The same event, after all listeners ran
        """
        for listener in self.get_listeners(event_name):
            if event.is_propagation_stopped():
                break
            listener(event)
        return event
