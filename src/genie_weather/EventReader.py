"""
Read frames from the display and queue them for the dispatcher.

The reader blocks on the link (bounded by the link's read timeout) instead of
sleeping between polls. After every received frame all frames that are
already buffered are drained as well, so they are queued strictly in arrival
order.
"""
import logging
import queue
import threading
import time
from typing import Optional, Protocol

from genie_link import GaugeEventRecord, LinkError


class EventSource(Protocol):
    def poll_event_available(self) -> bool:
        ...

    def read_next_event(self) -> Optional[GaugeEventRecord]:
        ...


class EventReader(threading.Thread):
    def __init__(
        self,
        link: EventSource,
        events: 'queue.Queue[GaugeEventRecord]',
        retry_interval_ms: int = 100
    ) -> None:
        super().__init__(daemon=True, name="EventReader")

        self._link = link
        self._events = events
        self._retry_interval = retry_interval_ms / 1000

        self._running = threading.Event()

    def _emit(self, record: Optional[GaugeEventRecord]) -> None:
        if record is None:
            return

        try:
            self._events.put_nowait(record)
        except queue.Full:
            logging.warning(f"Event queue full, dropping event: {record}")

    def read_once(self) -> None:
        """Wait for one frame, then drain everything already buffered."""
        self._emit(self._link.read_next_event())

        while self._link.poll_event_available():
            self._emit(self._link.read_next_event())

    def start(self) -> None:
        self._running.set()
        super().start()

    def run(self) -> None:
        try:
            while self._running.is_set():
                try:
                    self.read_once()
                except LinkError as e:
                    logging.error(f"Error reading from display: {e}")
                    time.sleep(self._retry_interval)
        finally:
            self._running.clear()

    def is_running(self) -> bool:
        return self._running.is_set()

    def stop(self) -> None:
        if self._running.is_set():
            self._running.clear()
