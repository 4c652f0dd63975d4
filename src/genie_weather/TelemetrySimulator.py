"""
Base class for the temperature and pressure simulators.

Each simulator is a thread owning its telemetry state. Once per tick it pulls
a sample from its source, updates the state and pushes the live value to the
display. Every SAMPLES_PER_DAY ticks the samples are folded into a daily
average which is appended to the rolling history.

Other threads never mutate the state directly, they hand callables to
submit() which are executed on the simulator thread between two ticks.
"""
from abc import ABC, abstractmethod
import copy
import logging
import queue
import threading
import time
from typing import Any, Callable, Protocol

from .Waveform import SampleSource


class WidgetWriter(Protocol):
    def write_widget_value(self, widget_class: int, index: int, value: int) -> None:
        ...


class TelemetrySimulator(threading.Thread, ABC):
    SAMPLES_PER_DAY = 24

    def __init__(
        self,
        link: WidgetWriter,
        source: SampleSource,
        interval_ms: int = 100,
        name: str = "TelemetrySimulator"
    ) -> None:
        super().__init__(daemon=True, name=name)

        self._link = link
        self._source = source
        self._interval = interval_ms / 1000

        self._requests: queue.Queue[Callable[[], None]] = queue.Queue()
        self._running = threading.Event()
        self._state_lock = threading.Lock()

        self._day_sum = 0
        self._day_samples = 0
        self.days = 0

    @property
    @abstractmethod
    def state(self) -> Any:
        pass

    @abstractmethod
    def _record_sample(self, sample: int) -> None:
        """Store a new live sample in the state."""
        pass

    @abstractmethod
    def _close_day(self, average: int) -> None:
        """Append the daily aggregates to the rolling histories."""
        pass

    @abstractmethod
    def render_live(self) -> None:
        pass

    @abstractmethod
    def render_history(self) -> None:
        pass

    def render(self) -> None:
        self.render_history()
        self.render_live()

    def tick(self) -> None:
        sample = self._source.next_sample()

        with self._state_lock:
            self._record_sample(sample)
            self._day_sum += sample
            self._day_samples += 1

        self.render_live()

        if self._day_samples >= self.SAMPLES_PER_DAY:
            average = round(self._day_sum / self._day_samples)
            with self._state_lock:
                self._close_day(average)
                self._day_sum = 0
                self._day_samples = 0
                self.days += 1

            logging.debug(f"{self.name}: day {self.days} closed with average {average}")
            self.render_history()

    def get_state(self) -> Any:
        with self._state_lock:
            return copy.deepcopy(self.state)

    def submit(self, request: Callable[[], None]) -> None:
        self._requests.put(request)

    def process_requests(self, timeout: float = 0.0) -> None:
        """
        Execute queued requests until `timeout` seconds have passed. With the
        default timeout only the already queued requests are processed.
        """
        deadline = time.monotonic() + timeout
        while True:
            remaining = deadline - time.monotonic()
            try:
                if remaining > 0:
                    request = self._requests.get(timeout=remaining)
                else:
                    request = self._requests.get_nowait()
            except queue.Empty:
                return

            try:
                request()
            except Exception as e:
                logging.error(f"{self.name}: Error applying request: {e}")

    def start(self) -> None:
        # Set before starting, stop() may follow immediately
        self._running.set()
        super().start()

    def run(self) -> None:
        self.render()

        while self._running.is_set():
            self.tick()
            self.process_requests(self._interval)

    def is_running(self) -> bool:
        return self._running.is_set()

    def stop(self) -> None:
        if self._running.is_set():
            self._running.clear()
