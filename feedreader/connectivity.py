"""Online/offline signal shared by feed sessions."""

from __future__ import annotations

import logging
from typing import Callable, List

LOGGER = logging.getLogger(__name__)

ConnectivityListener = Callable[[bool], None]


class ConnectivityMonitor:
    """Hold the current connectivity flag and notify listeners on transitions.

    The embedding application calls :meth:`set_online` from the event loop
    thread whenever the platform reports a change.
    """

    def __init__(self, initially_online: bool = True) -> None:
        self._online = initially_online
        self._listeners: List[ConnectivityListener] = []

    @property
    def is_online(self) -> bool:
        return self._online

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: ConnectivityListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ConnectivityListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def set_online(self, online: bool) -> None:
        if online == self._online:
            return
        self._online = online
        LOGGER.debug("Connectivity changed: %s", "online" if online else "offline")
        for listener in list(self._listeners):
            listener(online)


__all__ = ["ConnectivityListener", "ConnectivityMonitor"]
