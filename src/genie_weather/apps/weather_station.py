"""
Visi-Genie weather station demo.

Pushes simulated temperature and pressure to a 4D Systems display and resets
the minimum/maximum temperature when the matching buttons are pressed on the
display.

CTRL-C will exit cleanly
"""
import argparse
import logging
import signal
import sys
import time
import types

from genie_link import GenieLink, LinkInitError
from genie_weather import Settings, WeatherStation

parser = argparse.ArgumentParser(description="Visi-Genie weather station demo.")
parser.add_argument("--config", type=str, default=None,
                    help="Path to a TOML configuration file")
parser.add_argument("--port", type=str, default=None,
                    help="Serial device of the display (default: /dev/ttyAMA0)")
parser.add_argument("--baudrate", type=int, default=None,
                    help="Baud rate of the display (default: 115200)")
parser.add_argument("--write-config", action="store_true",
                    help="Write the effective configuration to --config and exit")
parser.add_argument("--log", default="INFO",
                    help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). (default: INFO)")

running = True


def signal_handler(sig: int, frame: types.FrameType | None) -> None:
    global running
    if running:
        running = False


def main() -> None:
    args = parser.parse_args()

    level_name = args.log.upper()
    level = getattr(logging, level_name, None)

    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {args.log}")

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    settings = Settings(args.config)
    display = settings.section("display")
    timing = settings.section("timing")

    if args.port is not None:
        display["port"] = args.port
    if args.baudrate is not None:
        display["baudrate"] = args.baudrate
    settings.set("display", display)

    if args.write_config:
        if args.config is None:
            parser.error("--write-config requires --config")

        settings.save()
        logging.info(f"Configuration written to {args.config}")
        sys.exit(0)

    logging.info("Visi-Genie Weather Station Demo")

    link = GenieLink(
        read_timeout_ms=display["read_timeout_ms"],
        write_failure_log_interval=timing["write_failure_log_interval_s"]
    )

    try:
        link.initialize_link(display["port"], display["baudrate"])
    except LinkInitError as e:
        logging.error(str(e))
        sys.exit(1)

    station = WeatherStation(link, settings)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    station.start()

    try:
        while running:
            time.sleep(0.1)

    finally:
        station.stop()
        link.close()

        if link.write_failures:
            logging.warning(f"{link.write_failures} widget writes failed")

    sys.exit(0)


if __name__ == "__main__":
    main()
