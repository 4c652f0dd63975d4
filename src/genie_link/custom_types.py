from dataclasses import dataclass
from enum import IntEnum


class GenieCommand(IntEnum):
    READ_OBJ = 0x00
    WRITE_OBJ = 0x01
    WRITE_STR = 0x02
    WRITE_STRU = 0x03
    WRITE_CONTRAST = 0x04
    REPORT_OBJ = 0x05
    ACK = 0x06
    REPORT_EVENT = 0x07
    NAK = 0x15


class GenieObject(IntEnum):
    DIPSW = 0
    KNOB = 1
    ROCKERSW = 2
    ROTARYSW = 3
    SLIDER = 4
    TRACKBAR = 5
    WINBUTTON = 6
    ANGULAR_METER = 7
    COOL_GAUGE = 8
    CUSTOM_DIGITS = 9
    FORM = 10
    GAUGE = 11
    IMAGE = 12
    KEYBOARD = 13
    LED = 14
    LED_DIGITS = 15
    METER = 16
    STRINGS = 17
    THERMOMETER = 18
    USER_LED = 19
    VIDEO = 20
    STATIC_TEXT = 21
    SOUND = 22
    TIMER = 23
    SPECTRUM = 24
    SCOPE = 25
    TANK = 26
    USERIMAGES = 27
    PINOUTPUT = 28
    PININPUT = 29
    BUTTON_4D = 30
    ANIBUTTON = 31
    COLORPICKER = 32
    USERBUTTON = 33


@dataclass(frozen=True)
class GaugeEventRecord:
    """A single frame reported by the display."""
    command_kind: int
    widget_class: int = 0
    widget_index: int = 0
    payload: int = 0
