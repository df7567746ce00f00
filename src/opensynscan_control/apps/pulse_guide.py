"""
Open a session, wait for the controller to announce itself and send a single
pulse guide command.
"""
import argparse
import logging
import signal
import sys
import time

from opensynscan_helper import SessionStartError
from opensynscan_control import Session, Settings
from opensynscan_control.packet import GuideDirection


def main():
    parser = argparse.ArgumentParser(description="Send a pulse guide command to an OpenSynscan controller.")
    parser.add_argument("direction", nargs="?", choices=[d.name.lower() for d in GuideDirection],
                        help="Guide direction")
    parser.add_argument("duration", nargs="?", type=int, help="Pulse duration in milliseconds")
    parser.add_argument("--config", default=None, help="Path to TOML settings file")
    parser.add_argument("--print-config", action="store_true",
                        help="Print the effective settings as TOML and exit")
    parser.add_argument("--wait", type=float, default=5.0,
                        help="Seconds to wait for the controller beacon (default: 5)")
    parser.add_argument("--log", default="INFO",
                        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). (default: INFO)")
    args = parser.parse_args()

    settings = Settings(args.config)
    if args.print_config:
        print(settings.dumps(), end="")
        return

    if args.direction is None or args.duration is None:
        parser.error("direction and duration are required")

    level_name = args.log.upper()
    level = getattr(logging, level_name, None)

    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {args.log}")

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    session = Session(settings)

    def shutdown(signum, frame):
        logging.info("Shutting down session...")
        session.disconnect()
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    try:
        session.connect()
    except SessionStartError as e:
        logging.error(e)
        sys.exit(1)

    try:
        device = session.wait_for_device(args.wait)
        if device is None:
            logging.warning(f"No beacon within {args.wait}s, falling back to broadcast")

        packet = session.pulse_guide(GuideDirection[args.direction.upper()], args.duration)
        logging.info(f"Sent {packet}")

        time.sleep(session.tracker.remaining())

        logging.info("Pulse finished")
    finally:
        session.disconnect()


if __name__ == "__main__":
    main()
