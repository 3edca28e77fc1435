# Area: Shared
"""
tron_racing._shared.event_dispatcher — Host event dispatcher
============================================================

Delivers host events to a ServerEventListener. The set of events is
fixed: each host event name maps to one listener method, and the
listener is bound once at construction.

Event records look like:
    {"event": "CYCLE_CREATED", "args": ["racer", 0.0, 0.0, 0.0, 1.0]}
    {"event": "PLAYER_LEFT", "args": {"name": "racer", "ip": "1.2.3.4"}}
"""

import inspect
import logging
from typing import Any, Callable, Dict, Mapping, Sequence

from ..callbacks import ServerEventListener
from ..errors import EventFormatError

logger = logging.getLogger("tron_racing.dispatch")

# Host event name -> ServerEventListener method name
EVENT_HANDLERS: Dict[str, str] = {
    "ROUND_COMMENCING": "round_commencing",
    "PLAYER_ENTERED": "player_entered",
    "PLAYER_LEFT": "player_left",
    "PLAYER_RENAMED": "player_renamed",
    "ONLINE_PLAYER": "online_player",
    "CYCLE_CREATED": "cycle_created",
    "TARGETZONE_PLAYER_ENTER": "target_zone_player_enter",
    "DEATH_SUICIDE": "death_suicide",
    "DEATH_FRAG": "death_frag",
    "DEATH_DEATHZONE": "death_deathzone",
    "DEATH_RUBBERZONE": "death_rubberzone",
    "PLAYER_KILLED": "player_killed",
}


class EventDispatcher:
    """
    Routes host events to one listener.

    Usage:
        dispatcher = EventDispatcher(server)
        dispatcher.dispatch({"event": "ROUND_COMMENCING", "args": []})
    """

    def __init__(self, listener: ServerEventListener):
        self.listener = listener
        self._handlers: Dict[str, Callable[..., None]] = {
            event: getattr(listener, method) for event, method in EVENT_HANDLERS.items()
        }

    def handles(self, event_name: str) -> bool:
        return event_name in self._handlers

    def dispatch(self, record: Any) -> bool:
        """
        Deliver one event record.

        Returns:
            True if delivered, False if the event name is not handled

        Raises:
            EventFormatError: If the record is malformed
        """
        if not isinstance(record, Mapping):
            raise EventFormatError("", record, "event record must be an object")
        event_name = record.get("event")
        if not isinstance(event_name, str) or not event_name:
            raise EventFormatError("", record, "missing 'event' name")

        args = record.get("args", [])
        if isinstance(args, Mapping):
            return self._deliver(event_name, record, (), dict(args))
        if isinstance(args, Sequence) and not isinstance(args, str):
            return self._deliver(event_name, record, tuple(args), {})
        raise EventFormatError(event_name, record, "'args' must be a list or an object")

    def dispatch_event(self, event_name: str, *args: Any) -> bool:
        """Deliver an event given as a name and positional arguments."""
        record = {"event": event_name, "args": list(args)}
        return self._deliver(event_name, record, args, {})

    def _deliver(
        self,
        event_name: str,
        record: Any,
        args: Sequence[Any],
        kwargs: Dict[str, Any],
    ) -> bool:
        handler = self._handlers.get(event_name)
        if handler is None:
            logger.warning(f"No handler for event: {event_name}")
            return False

        try:
            inspect.signature(handler).bind(*args, **kwargs)
        except TypeError as e:
            raise EventFormatError(event_name, record, str(e)) from e

        logger.debug(f"Dispatching {event_name}")
        handler(*args, **kwargs)
        return True
