"""
Stand-in for the controller: send beacons to the discovery port and log every
guide packet that comes back.

Beacons and guide packets share one socket, the client takes the source
address of the beacon as the device address. The socket binds an ephemeral
port by default so the emulator can run next to a client on the same host.
Pass --command-port 5002 when running on a separate machine to also catch the
broadcasts sent before discovery.
"""
import argparse
import logging
import select
import signal
import socket
import sys
import time
from typing import List, Optional

from opensynscan_helper import Address
from opensynscan_control.packet import Beacon, GuidePacket, Packet


class BeaconEmulator:
    BUFFER_SIZE = 2048

    def __init__(
        self,
        target: Address,
        port: int = 0,
        interval: float = 1.0,
        bind_address: str = "0.0.0.0"
    ) -> None:
        self.target = target
        self.interval = interval
        self.last_beacon: Optional[float] = None
        self.received: List[GuidePacket] = []

        self.socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self.socket.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            self.socket.bind((bind_address, port))
        except OSError:
            self.socket.close()
            raise
        logging.info(f"Waiting for guide packets on {self.address}")

    @property
    def address(self) -> Address:
        return self.socket.getsockname()

    def send_beacon(self) -> None:
        try:
            self.socket.sendto(Beacon().to_bytes(), self.target)
        except OSError as e:
            logging.warning(f"Socket error while sending beacon: {e}")

        self.last_beacon = time.monotonic()

    def poll(self, timeout: float = 0.1) -> Optional[GuidePacket]:
        """Send a beacon when one is due, then wait for a single guide packet."""
        if self.last_beacon is None or time.monotonic() - self.last_beacon >= self.interval:
            self.send_beacon()

        ready, _, _ = select.select([self.socket], [], [], timeout)
        if not ready:
            return None

        data, addr = self.socket.recvfrom(self.BUFFER_SIZE)
        try:
            packet = Packet.from_bytes(data)
        except ValueError as e:
            logging.debug(f"Ignoring datagram from {addr}: {e}")
            return None

        if not isinstance(packet, GuidePacket):
            logging.debug(f"Ignoring {packet.type} from {addr}")
            return None

        logging.info(f"{addr[0]}:{addr[1]} {packet}")
        self.received.append(packet)

        return packet

    def close(self) -> None:
        self.socket.close()


def main():
    parser = argparse.ArgumentParser(description="Emulate an OpenSynscan controller.")
    parser.add_argument("--target", default="255.255.255.255",
                        help="Address the beacon is sent to (default: 255.255.255.255)")
    parser.add_argument("--discovery-port", type=int, default=5003,
                        help="Port the client listens for beacons on (default: 5003)")
    parser.add_argument("--command-port", type=int, default=0,
                        help="Port to send beacons from and receive guide packets on (default: ephemeral)")
    parser.add_argument("--interval", type=float, default=1.0,
                        help="Seconds between beacons (default: 1)")
    parser.add_argument("--log", default="INFO",
                        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). (default: INFO)")
    args = parser.parse_args()

    level_name = args.log.upper()
    level = getattr(logging, level_name, None)

    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {args.log}")

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    emulator = BeaconEmulator(
        (args.target, args.discovery_port),
        args.command_port,
        args.interval
    )

    def shutdown(signum, frame):
        logging.info("Shutting down beacon...")
        emulator.close()
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    while True:
        emulator.poll()


if __name__ == "__main__":
    main()
