"""
Receive UDP datagrams on the discovery port and forward them to a handler.

The listener does not interpret the data, it only keeps the receive loop
armed: every datagram is handed to the handler and the loop goes straight
back to waiting, no matter what the handler made of it. Exceptions raised by
the handler are logged and swallowed so a malformed datagram can never stop
discovery.
"""
import logging
import select
import socket
import threading
from typing import Callable

from opensynscan_helper import Address


class DiscoveryListener(threading.Thread):
    # Beacons are two bytes, anything bigger is read and dropped whole
    BUFFERSIZE = 2048

    def __init__(
        self,
        sock: socket.socket,
        handler: Callable[[bytes, Address], None],
        timeout_ms: int = 100,
    ):
        super().__init__(daemon=True, name="DiscoveryListener")

        self.socket = sock
        assert self.socket.type == socket.SOCK_DGRAM, "DiscoveryListener expects a UDP socket"

        self.handler = handler
        self.timeout = timeout_ms / 1000

        self._running = threading.Event()

    def start(self) -> None:
        self._running.set()
        super().start()

    def run(self) -> None:
        try:
            while self._running.is_set():
                try:
                    ready, _, _ = select.select([self.socket], [], [], self.timeout)
                except (ValueError, OSError) as e:
                    # Socket closed during teardown
                    if self._running.is_set():
                        logging.error(f"Socket error during select: {e}")
                    break

                # Timeout, no data ready
                if not ready:
                    continue

                try:
                    data, addr = self.socket.recvfrom(self.BUFFERSIZE)
                except OSError as e:
                    if self._running.is_set():
                        logging.error(f"Socket error during recvfrom: {e}")
                    break

                if not data:
                    continue

                try:
                    self.handler(data, addr)
                except Exception as e:
                    logging.error(f"Error in datagram handler: {e}", exc_info=True)

        finally:
            self._running.clear()

    def is_running(self) -> bool:
        return self._running.is_set()

    def stop(self) -> None:
        if self._running.is_set():
            self._running.clear()
