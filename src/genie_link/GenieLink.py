"""
Thin adapter around the serial link to a 4D Systems Visi-Genie display.

Every frame exchanged with the display has the same layout:

    [command, object, index, value MSB, value LSB, checksum]

The checksum is the XOR of the first five bytes. The display answers writes
with a single ACK or NAK byte and reports user interaction with REPORT_EVENT
frames.

Writes are fire and forget: nobody waits for the ACK. Failed writes (serial
errors and NAK replies) are counted and reported with a rate limited warning.

NOTE: Checksums of incoming frames are not verified, the link is assumed to
      be reliable.
"""
import logging
import threading
import time
from typing import Optional

import serial

from .custom_types import GaugeEventRecord, GenieCommand
from .exceptions import LinkInitError, LinkIOError


class GenieLink:
    FRAME_LENGTH = 6

    def __init__(
        self,
        read_timeout_ms: int = 100,
        write_failure_log_interval: float = 5.0
    ) -> None:
        self._read_timeout = read_timeout_ms / 1000
        self._write_failure_log_interval = write_failure_log_interval

        self._serial: Optional[serial.Serial] = None
        self._write_lock = threading.Lock()
        self._failure_lock = threading.Lock()

        self.write_failures = 0
        self._last_failure_log: Optional[float] = None

    def initialize_link(self, port: str, baudrate: int = 115200) -> None:
        try:
            self._serial = serial.Serial(port, baudrate, timeout=self._read_timeout)
        except (serial.SerialException, OSError) as e:
            raise LinkInitError(f"Can't initialise Genie display on {port}: {e}") from e

        logging.debug(f"Opened Genie display on {port} @ {baudrate} baud")

    def is_open(self) -> bool:
        return self._serial is not None and self._serial.is_open

    def _checksum(self, data: bytes) -> int:
        checksum = 0
        for byte in data:
            checksum ^= byte

        return checksum

    def encode_frame(self, command: int, obj: int, index: int, value: int) -> bytes:
        value &= 0xFFFF
        frame = bytes([
            command & 0xFF,
            obj & 0xFF,
            index & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        ])

        return frame + bytes([self._checksum(frame)])

    def write_widget_value(self, widget_class: int, index: int, value: int) -> None:
        frame = self.encode_frame(GenieCommand.WRITE_OBJ, widget_class, index, int(value))

        if self._serial is None:
            self._record_write_failure("link not initialized")
            return

        try:
            with self._write_lock:
                self._serial.write(frame)
        except (serial.SerialException, OSError) as e:
            self._record_write_failure(str(e))

    def poll_event_available(self) -> bool:
        if self._serial is None:
            return False

        try:
            return self._serial.in_waiting > 0
        except (serial.SerialException, OSError) as e:
            raise LinkIOError(f"Failed polling display: {e}") from e

    def read_next_event(self) -> Optional[GaugeEventRecord]:
        """
        Read one frame from the display, waiting at most the read timeout.

        Returns None if nothing arrived in time or if the received byte was a
        reply to one of our writes (ACK/NAK).
        """
        if self._serial is None:
            return None

        try:
            header = self._serial.read(1)
            if not header:
                return None

            command = header[0]
            if command == GenieCommand.ACK:
                return None

            if command == GenieCommand.NAK:
                self._record_write_failure("display replied with NAK")
                return None

            if command not in (GenieCommand.REPORT_EVENT, GenieCommand.REPORT_OBJ):
                return GaugeEventRecord(command_kind=command)

            body = self._serial.read(self.FRAME_LENGTH - 1)
        except (serial.SerialException, OSError) as e:
            raise LinkIOError(f"Failed reading from display: {e}") from e

        if len(body) < self.FRAME_LENGTH - 1:
            logging.warning(f"Dropping truncated frame: {(header + body).hex()}")
            return None

        return GaugeEventRecord(
            command_kind=command,
            widget_class=body[0],
            widget_index=body[1],
            payload=(body[2] << 8) | body[3]
        )

    def _record_write_failure(self, reason: str) -> None:
        with self._failure_lock:
            self.write_failures += 1

            now = time.monotonic()
            if (
                self._last_failure_log is None or
                now - self._last_failure_log >= self._write_failure_log_interval
            ):
                self._last_failure_log = now
                logging.warning(
                    f"Widget write failed: {reason} ({self.write_failures} failures so far)"
                )

    def close(self) -> None:
        if self._serial is not None:
            self._serial.close()
            self._serial = None
