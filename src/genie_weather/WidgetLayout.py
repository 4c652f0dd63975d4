"""Where on the display each value is rendered."""
from dataclasses import dataclass
from typing import Any, Dict

from genie_link import GenieObject


@dataclass(frozen=True)
class WidgetAddress:
    widget_class: GenieObject
    index: int

    def offset(self, n: int) -> 'WidgetAddress':
        """Address of the n-th slot in a contiguous run starting here."""
        return WidgetAddress(self.widget_class, self.index + n)


@dataclass(frozen=True)
class WidgetLayout:
    # Gauge runs, one gauge per day of the week
    temperature_history: WidgetAddress = WidgetAddress(GenieObject.GAUGE, 0)
    minimum_history: WidgetAddress = WidgetAddress(GenieObject.GAUGE, 7)
    maximum_history: WidgetAddress = WidgetAddress(GenieObject.GAUGE, 14)
    pressure_history: WidgetAddress = WidgetAddress(GenieObject.GAUGE, 21)

    temperature_thermometer: WidgetAddress = WidgetAddress(GenieObject.THERMOMETER, 0)
    minimum_thermometer: WidgetAddress = WidgetAddress(GenieObject.THERMOMETER, 1)
    maximum_thermometer: WidgetAddress = WidgetAddress(GenieObject.THERMOMETER, 2)
    pressure_gauge: WidgetAddress = WidgetAddress(GenieObject.COOL_GAUGE, 0)

    reset_minimum_button: WidgetAddress = WidgetAddress(GenieObject.WINBUTTON, 2)
    reset_maximum_button: WidgetAddress = WidgetAddress(GenieObject.WINBUTTON, 6)

    start_form: WidgetAddress = WidgetAddress(GenieObject.FORM, 0)

    @classmethod
    def from_settings(cls, widgets: Dict[str, Any], start_form: int = 0) -> 'WidgetLayout':
        """
        Build a layout from the `widgets` settings section, which maps role
        names to widget indexes. Unknown keys are ignored, missing keys keep
        their defaults.
        """
        defaults = cls()
        addresses: Dict[str, WidgetAddress] = {}
        for name, index in widgets.items():
            default = getattr(defaults, name, None)
            if not isinstance(default, WidgetAddress):
                continue

            addresses[name] = WidgetAddress(default.widget_class, int(index))

        addresses["start_form"] = WidgetAddress(GenieObject.FORM, int(start_form))

        return cls(**addresses)
