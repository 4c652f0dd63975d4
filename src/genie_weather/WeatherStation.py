"""
Wires the simulators, the event reader and the dispatcher to one display
link.

start() selects the start page on the display and launches all threads,
stop() signals every thread and waits for it to finish.
"""
import logging
import queue
import threading
from typing import List, Protocol

from genie_link import GaugeEventRecord

from .EventDispatcher import EventDispatcher
from .EventReader import EventReader, EventSource
from .PressureSimulator import PressureSimulator
from .Settings import Settings
from .TelemetrySimulator import WidgetWriter
from .TemperatureSimulator import TemperatureSimulator
from .WidgetLayout import WidgetLayout


class DisplayLink(WidgetWriter, EventSource, Protocol):
    pass


class WeatherStation:
    EVENT_QUEUE_SIZE = 100

    def __init__(self, link: DisplayLink, settings: Settings) -> None:
        self._link = link

        display = settings.section("display")
        timing = settings.section("timing")

        self.layout = WidgetLayout.from_settings(
            settings.section("widgets"),
            display.get("start_form", 0)
        )

        sample_interval_ms = timing.get("sample_interval_ms", 100)
        event_timeout_ms = timing.get("event_timeout_ms", 100)

        self.events: queue.Queue[GaugeEventRecord] = queue.Queue(maxsize=self.EVENT_QUEUE_SIZE)

        self.temperature = TemperatureSimulator(
            link,
            self.layout,
            interval_ms=sample_interval_ms
        )
        self.pressure = PressureSimulator(
            link,
            self.layout,
            interval_ms=sample_interval_ms
        )
        self.reader = EventReader(link, self.events, retry_interval_ms=event_timeout_ms)
        self.dispatcher = EventDispatcher(
            self.events,
            self.temperature,
            self.layout,
            timeout_ms=event_timeout_ms
        )

        self._started = threading.Event()

    @property
    def threads(self) -> List[threading.Thread]:
        return [self.temperature, self.pressure, self.reader, self.dispatcher]

    def select_start_form(self) -> None:
        form = self.layout.start_form
        self._link.write_widget_value(form.widget_class, form.index, 0)

    def start(self) -> None:
        if self._started.is_set():
            return

        self.select_start_form()

        for thread in self.threads:
            thread.start()

        self._started.set()
        logging.info("Weather station started")

    def stop(self) -> None:
        if not self._started.is_set():
            return

        for thread in self.threads:
            thread.stop()

        for thread in self.threads:
            thread.join()

        self._started.clear()
        logging.info("Weather station stopped")
