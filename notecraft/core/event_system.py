"""
notecraft/core/event_system.py
Publish/subscribe bus between the crafting core and whatever presents it.
"""
from typing import Dict, List, Any, Callable, Optional, Set

from notecraft.utils.logger import Logger

# Topics published by the crafting core
EVENT_CATALOG_REFRESHED = "catalog_refreshed"
EVENT_RECIPE_SELECTED = "recipe_selected"
EVENT_CRAFT_SUCCEEDED = "craft_succeeded"
EVENT_CRAFT_BLOCKED = "craft_blocked"
EVENT_SOUND_CUE = "sound_cue"

EventCallback = Callable[[str, Any], None]


class EventSystem:
    """
    Lets the crafting core notify the UI without importing it.

    Callbacks receive (event_type, data). The last payload of every topic is
    kept so late subscribers can catch up.
    """

    def __init__(self):
        self.subscribers: Dict[str, List[EventCallback]] = {}
        self.event_history: Dict[str, Any] = {}

    def subscribe(self, event_type: str, callback: EventCallback) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The type of event to subscribe to.
            callback: The function to call when the event occurs.
        """
        callbacks = self.subscribers.setdefault(event_type, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def unsubscribe(self, event_type: str, callback: EventCallback) -> None:
        if event_type in self.subscribers and callback in self.subscribers[event_type]:
            self.subscribers[event_type].remove(callback)
            if not self.subscribers[event_type]:
                self.subscribers.pop(event_type)

    def publish(self, event_type: str, data: Any = None) -> None:
        """
        Publish an event. A failing subscriber is logged and does not stop the others.

        Args:
            event_type: The type of event to publish.
            data: The event data.
        """
        self.event_history[event_type] = data

        for callback in list(self.subscribers.get(event_type, [])):
            try:
                callback(event_type, data)
            except Exception as e:
                Logger.error("EventSystem", f"Error in event callback for {event_type}: {e}")

    def get_last_event_data(self, event_type: str, default: Any = None) -> Any:
        return self.event_history.get(event_type, default)

    def clear_history(self, event_types: Optional[Set[str]] = None) -> None:
        """
        Clear event history.

        Args:
            event_types: Set of event types to clear. If None, clear all.
        """
        if event_types is None:
            self.event_history.clear()
        else:
            for event_type in event_types:
                self.event_history.pop(event_type, None)
