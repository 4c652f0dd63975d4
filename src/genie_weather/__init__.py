from .RollingHistory import RollingHistory
from .Waveform import SampleSource, SineWaveform
from .TelemetryState import TemperatureState, PressureState
from .WidgetLayout import WidgetAddress, WidgetLayout
from .TelemetrySimulator import TelemetrySimulator
from .TemperatureSimulator import TemperatureSimulator
from .PressureSimulator import PressureSimulator
from .EventReader import EventReader
from .EventDispatcher import EventDispatcher
from .Settings import Settings
from .WeatherStation import WeatherStation

__all__ = [
  'RollingHistory',
  'SampleSource',
  'SineWaveform',
  'TemperatureState',
  'PressureState',
  'WidgetAddress',
  'WidgetLayout',
  'TelemetrySimulator',
  'TemperatureSimulator',
  'PressureSimulator',
  'EventReader',
  'EventDispatcher',
  'Settings',
  'WeatherStation',
]
