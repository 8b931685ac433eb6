"""
Observer hooks for outgoing API traffic.
`GitHubClient` dispatches "request" before each call and "response" after it;
subscriptions are (event_name -> list of callables).
"""
import logging
from threading import Lock
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)


class EventDispatcher:
    def __init__(self):
        self._listeners: Dict[str, List[Callable[..., None]]] = {}
        self._lock = Lock()

    def subscribe(self, event_name: str, callback: Callable[..., None]) -> None:
        with self._lock:
            self._listeners.setdefault(event_name, []).append(callback)

    def unsubscribe(self, event_name: str, callback: Callable[..., None]) -> None:
        with self._lock:
            listeners = self._listeners.get(event_name, [])
            if callback in listeners:
                listeners.remove(callback)

    def dispatch(self, event_name: str, **payload) -> None:
        with self._lock:
            listeners = list(self._listeners.get(event_name, []))
        for listener in listeners:
            try:
                listener(**payload)
            except Exception:
                # a broken listener must not fail the API call it observes
                logger.exception("Listener for '%s' failed", event_name)
