"""
Connectivity monitor - Watches reachability of the remote API.

The monitor polls a ConnectivityProbe and reports changes to its
listeners. Listeners only hear about transitions, so a steady
"connected" state never re-triggers work downstream.
"""

import logging
import threading
from collections.abc import Callable

from src.domain.ports import ConnectivityProbe, EosbApi

logger = logging.getLogger(__name__)

Listener = Callable[[bool], object]


class HealthCheckProbe:
    """
    Implements ConnectivityProbe protocol via the API health endpoint.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, api: EosbApi) -> None:
        self._api = api

    def is_reachable(self) -> bool:
        return self._api.check_health()


class ConnectivityMonitor:
    """
    Single source of connectivity state.

    Both the background poll loop and reports from clients go through
    report(), so listeners see one consistent sequence of transitions.
    """

    def __init__(self, probe: ConnectivityProbe, listeners: list[Listener] | None = None) -> None:
        self._probe = probe
        self._listeners = list(listeners or [])
        self._lock = threading.Lock()
        self.is_connected: bool | None = None

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def poll(self) -> bool:
        """
        Probe once and notify listeners if the state changed.

        The first poll always notifies, since the previous state is unknown.

        Returns:
            Current reachability
        """
        connected = self._probe.is_reachable()
        self.report(connected)
        return connected

    def report(self, connected: bool) -> bool:
        """
        Record a reachability observation from any source.

        Returns:
            True if the state changed and listeners were notified
        """
        with self._lock:
            if connected == self.is_connected:
                return False
            logger.info("Connectivity changed: %s", "online" if connected else "offline")
            self.is_connected = connected
            for listener in self._listeners:
                listener(connected)
            return True

    def run(self, interval: float, stop_event: threading.Event) -> None:
        """Poll every interval seconds until stop_event is set."""
        while not stop_event.is_set():
            self.poll()
            stop_event.wait(interval)

    def start(self, interval: float) -> tuple[threading.Thread, threading.Event]:
        """Run the poll loop on a daemon thread; set the returned event to stop it."""
        stop_event = threading.Event()
        thread = threading.Thread(
            target=self.run,
            args=(interval, stop_event),
            name="connectivity-monitor",
            daemon=True,
        )
        thread.start()
        return thread, stop_event
