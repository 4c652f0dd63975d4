"""Tests for WeatherStation composition."""
import queue
import threading
import time
import unittest

from genie_link import GaugeEventRecord, GenieCommand, GenieObject
from genie_weather import Settings, WeatherStation


class FakeLink:
    """Records widget writes and serves injected display events."""

    def __init__(self):
        self.writes = []
        self._lock = threading.Lock()
        self._incoming = queue.Queue()

    def write_widget_value(self, widget_class, index, value):
        with self._lock:
            self.writes.append((widget_class, index, value))

    def poll_event_available(self):
        return not self._incoming.empty()

    def read_next_event(self):
        try:
            return self._incoming.get(timeout=0.01)
        except queue.Empty:
            return None

    def press(self, index):
        self._incoming.put(
            GaugeEventRecord(GenieCommand.REPORT_EVENT, GenieObject.WINBUTTON, index, 1)
        )


def wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            return False
        time.sleep(0.01)

    return True


class TestWeatherStation(unittest.TestCase):
    def setUp(self):
        self.link = FakeLink()
        self.settings = Settings()
        timing = self.settings.section("timing")
        timing["sample_interval_ms"] = 2
        timing["event_timeout_ms"] = 10
        self.settings.set("timing", timing)

        self.station = WeatherStation(self.link, self.settings)

    def tearDown(self):
        self.station.stop()

    def test_start_selects_form_first(self):
        self.station.start()

        self.assertEqual(self.link.writes[0], (GenieObject.FORM, 0, 0))
        for thread in self.station.threads:
            self.assertTrue(thread.is_alive())

    def test_simulators_close_days(self):
        self.station.start()

        self.assertTrue(wait_for(lambda: self.station.temperature.days >= 1))
        self.assertTrue(wait_for(lambda: self.station.pressure.days >= 1))

        self.assertNotEqual(self.station.temperature.get_state().history.newest, 0)
        self.assertNotEqual(self.station.pressure.get_state().history.newest, 0)

    def test_button_press_resets_minimum(self):
        """Test a button press travels reader -> dispatcher -> simulator."""
        self.station.start()
        self.assertTrue(wait_for(lambda: self.station.temperature.get_state().current > 20))

        self.link.press(2)

        self.assertTrue(wait_for(lambda: self.station.temperature.get_state().minimum > 15))

    def test_stop_joins_all_threads(self):
        self.station.start()
        self.station.stop()

        for thread in self.station.threads:
            self.assertFalse(thread.is_alive())

    def test_stop_before_start_is_noop(self):
        self.station.stop()

        self.assertEqual(self.link.writes, [])


if __name__ == '__main__':
    unittest.main()
