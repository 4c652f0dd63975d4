"""
Route events reported by the display to their handlers.

Only button presses (REPORT_EVENT for a WINBUTTON) are acted upon: the reset
buttons ask the temperature simulator to reset its running minimum or
maximum. Everything else is logged and discarded, no state is touched.
"""
import logging
import queue
import threading
from typing import Protocol

from genie_link import GaugeEventRecord, GenieCommand, GenieObject

from .WidgetLayout import WidgetLayout


class ExtremaResetter(Protocol):
    def request_reset_minimum(self) -> None:
        ...

    def request_reset_maximum(self) -> None:
        ...


class EventDispatcher(threading.Thread):
    def __init__(
        self,
        events: 'queue.Queue[GaugeEventRecord]',
        temperature: ExtremaResetter,
        layout: WidgetLayout,
        timeout_ms: int = 100
    ) -> None:
        super().__init__(daemon=True, name="EventDispatcher")

        self._events = events
        self._temperature = temperature
        self._layout = layout
        self._timeout = timeout_ms / 1000

        self.dispatched = 0
        self._running = threading.Event()

    def dispatch(self, record: GaugeEventRecord) -> None:
        if record.command_kind != GenieCommand.REPORT_EVENT:
            logging.info(f"Invalid event from the display: 0x{record.command_kind:02X}")
            return

        self.dispatched += 1

        if record.widget_class == GenieObject.WINBUTTON:
            self._handle_button(record.widget_index)
        else:
            logging.warning(
                f"Unhandled event: object: {record.widget_class:2d}, "
                f"index: {record.widget_index} data: {record.payload} "
                f"[{record.widget_class:02X} {record.widget_index:02X} {record.payload:04X}]"
            )

    def _handle_button(self, index: int) -> None:
        match index:
            case self._layout.reset_minimum_button.index:
                logging.debug("Reset minimum button pressed")
                self._temperature.request_reset_minimum()

            case self._layout.reset_maximum_button.index:
                logging.debug("Reset maximum button pressed")
                self._temperature.request_reset_maximum()

            case _:
                logging.warning(f"Unknown button: {index}")

    def start(self) -> None:
        self._running.set()
        super().start()

    def run(self) -> None:
        while self._running.is_set():
            try:
                record = self._events.get(timeout=self._timeout)
            except queue.Empty:
                continue

            try:
                self.dispatch(record)
            except Exception as e:
                logging.error(f"Error dispatching event {record}: {e}")

    def is_running(self) -> bool:
        return self._running.is_set()

    def stop(self) -> None:
        if self._running.is_set():
            self._running.clear()
