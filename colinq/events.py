from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from .containers.list import List as ColinqList
from .types import *

logger = logging.getLogger(__name__)

TEventArgs = TypeVar('TEventArgs')


class EventArgs:
    """base class for event data"""
    empty: 'EventArgs'

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# an event with no data
EventArgs.empty = EventArgs()

# handlers receive (sender, event_args)
EventHandler = Callable[[Any, TEventArgs], None]


class IEvent(ABC, Generic[TEventArgs]):
    """the subscribe-only side of an event"""

    @abstractmethod
    def add_handler(self, handler: EventHandler) -> EventHandler:
        """register a handler; returns it so the caller can detach it later"""
        pass

    @abstractmethod
    def remove_handler(self, handler: EventHandler) -> None:
        pass


class Event(IEvent[TEventArgs]):
    """synchronous multicast event. handlers run in registration order."""

    def __init__(self):
        self._handlers: ColinqList[EventHandler] = ColinqList()

    def add_handler(self, handler: EventHandler) -> EventHandler:
        self._handlers.add(handler)
        logger.debug(f"handler {getattr(handler, '__name__', handler)!r} added ({self._handlers.length()} total)")
        return handler

    def remove_handler(self, handler: EventHandler) -> None:
        """unregister every registration of the handler"""
        self._handlers.remove_all(handler)

    def remove_all_handlers(self) -> None:
        self._handlers.clear()

    def handler_count(self) -> int:
        return self._handlers.length()

    def invoke(self, sender: Any, e: TEventArgs) -> None:
        """
        notify every handler. a handler raising stops dispatch and propagates;
        adding or removing handlers from inside a handler raises CollectionModifiedError.
        """
        logger.debug(f"dispatching {type(e).__name__} to {self._handlers.length()} handler(s)")
        self._handlers.each(lambda handler, _: handler(sender, e))

    @staticmethod
    def invoke_event(event: IEvent[TEventArgs], sender: Any, e: TEventArgs) -> None:
        """invoke an event that is only known through its IEvent surface"""
        _as_event(event).invoke(sender, e)

    @staticmethod
    def clear_event(event: IEvent[TEventArgs]) -> None:
        """remove all handlers from an event that is only known through its IEvent surface"""
        _as_event(event).remove_all_handlers()


def _as_event(event: IEvent) -> Event:
    if not isinstance(event, Event):
        raise TypeError(f"expected an Event, got {type(event).__name__}")
    return event
