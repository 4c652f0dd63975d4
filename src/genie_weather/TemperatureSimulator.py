import logging
from typing import Optional

from .RollingHistory import RollingHistory
from .TelemetrySimulator import TelemetrySimulator, WidgetWriter
from .TelemetryState import TemperatureState
from .Waveform import SampleSource, SineWaveform
from .WidgetLayout import WidgetAddress, WidgetLayout
from .helper import temperature_gauge_value, thermometer_value


class TemperatureSimulator(TelemetrySimulator):
    """
    Simulated temperature with running minimum/maximum.

    The temperature page shows three runs of history gauges (daily average,
    minimum and maximum) each with a thermometer for the live value. The
    minimum and maximum can be reset to the live temperature from the
    display.
    """

    def __init__(
        self,
        link: WidgetWriter,
        layout: Optional[WidgetLayout] = None,
        source: Optional[SampleSource] = None,
        interval_ms: int = 100
    ) -> None:
        super().__init__(
            link,
            source if source is not None else SineWaveform.temperature(),
            interval_ms,
            name="TemperatureSimulator"
        )

        self._layout = layout if layout is not None else WidgetLayout()
        self._state = TemperatureState()

    @property
    def state(self) -> TemperatureState:
        return self._state

    def _record_sample(self, sample: int) -> None:
        self._state.current = sample
        if sample > self._state.maximum:
            self._state.maximum = sample
        if sample < self._state.minimum:
            self._state.minimum = sample

    def _close_day(self, average: int) -> None:
        self._state.history.append(average)
        self._state.minimum_history.append(self._state.minimum)
        self._state.maximum_history.append(self._state.maximum)

    def _render_series(
        self,
        history: RollingHistory,
        base: WidgetAddress,
        value: int,
        thermometer: WidgetAddress
    ) -> None:
        for i, day in enumerate(history):
            address = base.offset(i)
            self._link.write_widget_value(
                address.widget_class,
                address.index,
                temperature_gauge_value(day)
            )

        self._link.write_widget_value(
            thermometer.widget_class,
            thermometer.index,
            thermometer_value(value)
        )

    def render_live(self) -> None:
        thermometer = self._layout.temperature_thermometer
        self._link.write_widget_value(
            thermometer.widget_class,
            thermometer.index,
            thermometer_value(self._state.current)
        )

    def render_minimum(self) -> None:
        self._render_series(
            self._state.minimum_history,
            self._layout.minimum_history,
            self._state.minimum,
            self._layout.minimum_thermometer
        )

    def render_maximum(self) -> None:
        self._render_series(
            self._state.maximum_history,
            self._layout.maximum_history,
            self._state.maximum,
            self._layout.maximum_thermometer
        )

    def render_history(self) -> None:
        self._render_series(
            self._state.history,
            self._layout.temperature_history,
            self._state.current,
            self._layout.temperature_thermometer
        )
        self.render_minimum()
        self.render_maximum()

    def reset_minimum(self) -> None:
        """Set the running minimum to the live temperature."""
        with self._state_lock:
            if self._state.minimum == self._state.current:
                logging.debug("Minimum already at current temperature")
                return

            self._state.minimum = self._state.current

        logging.info(f"Minimum temperature reset to {self._state.minimum}")
        self.render_minimum()

    def reset_maximum(self) -> None:
        """Set the running maximum to the live temperature."""
        with self._state_lock:
            if self._state.maximum == self._state.current:
                logging.debug("Maximum already at current temperature")
                return

            self._state.maximum = self._state.current

        logging.info(f"Maximum temperature reset to {self._state.maximum}")
        self.render_maximum()

    def request_reset_minimum(self) -> None:
        self.submit(self.reset_minimum)

    def request_reset_maximum(self) -> None:
        self.submit(self.reset_maximum)
