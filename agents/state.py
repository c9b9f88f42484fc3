"""Shared key-value state for an agent network.

Tools read and write this store; the router inspects it to decide which
agent runs next.
"""

import logging
from threading import Lock
from typing import Any, Dict

logger = logging.getLogger(__name__)


class NetworkState:
    """Thread-safe key-value store shared by the agents of one network."""

    def __init__(self, initial: Dict[str, Any] = None):
        self._data: Dict[str, Any] = dict(initial or {})
        self._lock = Lock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(key, default)

    def set(self, key: str, value: Any):
        with self._lock:
            self._data[key] = value
        logger.debug("State set: %s", key)

    def extend(self, key: str, values) -> list:
        """Append values to the list stored under `key`, creating it if needed."""
        with self._lock:
            current = list(self._data.get(key) or [])
            current.extend(values)
            self._data[key] = current
            return list(current)

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def delete(self, key: str) -> bool:
        """Remove a key. Returns True if it was present."""
        with self._lock:
            if key not in self._data:
                return False
            del self._data[key]
            return True

    def snapshot(self) -> Dict[str, Any]:
        """Shallow copy of the current contents."""
        with self._lock:
            return dict(self._data)

    def __contains__(self, key: str) -> bool:
        return self.has(key)
