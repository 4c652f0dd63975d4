"""Tests for EventReader."""
import queue
import time
import unittest
from unittest.mock import MagicMock

from genie_link import GaugeEventRecord, GenieCommand, GenieObject, LinkIOError
from genie_weather import EventReader


def record(index: int) -> GaugeEventRecord:
    return GaugeEventRecord(GenieCommand.REPORT_EVENT, GenieObject.WINBUTTON, index, 0)


class FakeLink:
    """Serves a fixed list of frames, None stands for an ACK or a timeout."""

    def __init__(self, frames):
        self.frames = list(frames)

    def poll_event_available(self):
        return len(self.frames) > 0

    def read_next_event(self):
        if not self.frames:
            time.sleep(0.005)
            return None

        return self.frames.pop(0)


class TestEventReader(unittest.TestCase):
    def setUp(self):
        self.events = queue.Queue()

    def test_read_once_drains_buffered_frames_in_order(self):
        link = FakeLink([record(1), None, record(2), record(3)])
        reader = EventReader(link, self.events)

        reader.read_once()

        received = [self.events.get_nowait().widget_index for _ in range(self.events.qsize())]
        self.assertEqual(received, [1, 2, 3])
        self.assertEqual(link.frames, [])

    def test_timeout_queues_nothing(self):
        reader = EventReader(FakeLink([]), self.events)

        reader.read_once()

        self.assertTrue(self.events.empty())

    def test_full_queue_drops_event(self):
        events = queue.Queue(maxsize=1)
        reader = EventReader(FakeLink([record(1), record(2)]), events)

        with self.assertLogs(level="WARNING"):
            reader.read_once()

        self.assertEqual(events.get_nowait().widget_index, 1)

    def test_run_forwards_events(self):
        link = FakeLink([record(2), record(6)])
        reader = EventReader(link, self.events)
        reader.start()

        first = self.events.get(timeout=1)
        second = self.events.get(timeout=1)

        reader.stop()
        reader.join(timeout=1)

        self.assertEqual((first.widget_index, second.widget_index), (2, 6))
        self.assertFalse(reader.is_alive())

    def test_link_error_is_logged_and_retried(self):
        reads = []

        def read_next_event():
            reads.append(True)
            if len(reads) == 1:
                raise LinkIOError("gone")
            if len(reads) == 2:
                return record(2)

            time.sleep(0.005)
            return None

        link = MagicMock()
        link.poll_event_available.return_value = False
        link.read_next_event.side_effect = read_next_event

        reader = EventReader(link, self.events, retry_interval_ms=10)
        with self.assertLogs(level="ERROR"):
            reader.start()
            received = self.events.get(timeout=1)

        reader.stop()
        reader.join(timeout=1)

        self.assertEqual(received.widget_index, 2)


if __name__ == '__main__':
    unittest.main()
