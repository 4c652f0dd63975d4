from typing import Optional

from .TelemetrySimulator import TelemetrySimulator, WidgetWriter
from .TelemetryState import PressureState
from .Waveform import SampleSource, SineWaveform
from .WidgetLayout import WidgetLayout
from .helper import pressure_gauge_value, pressure_history_value


class PressureSimulator(TelemetrySimulator):
    """Simulated atmospheric pressure, eight days of history and a live gauge."""

    def __init__(
        self,
        link: WidgetWriter,
        layout: Optional[WidgetLayout] = None,
        source: Optional[SampleSource] = None,
        interval_ms: int = 100
    ) -> None:
        super().__init__(
            link,
            source if source is not None else SineWaveform.pressure(),
            interval_ms,
            name="PressureSimulator"
        )

        self._layout = layout if layout is not None else WidgetLayout()
        self._state = PressureState()

    @property
    def state(self) -> PressureState:
        return self._state

    def _record_sample(self, sample: int) -> None:
        self._state.current = sample

    def _close_day(self, average: int) -> None:
        self._state.history.append(average)

    def render_live(self) -> None:
        gauge = self._layout.pressure_gauge
        self._link.write_widget_value(
            gauge.widget_class,
            gauge.index,
            pressure_gauge_value(self._state.current)
        )

    def render_history(self) -> None:
        base = self._layout.pressure_history
        for i, day in enumerate(self._state.history):
            address = base.offset(i)
            self._link.write_widget_value(
                address.widget_class,
                address.index,
                pressure_history_value(day)
            )
