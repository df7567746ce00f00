"""
A session owns the two UDP sockets and the address of the controller.

The session can be in one of three states:

1. DISCONNECTED: No sockets are open, guide commands are refused.
2. UNDISCOVERED: Sockets are open and the listener waits for a beacon. Guide
  commands are broadcast once to the command port.
3. DISCOVERED: A beacon has been received, its sender is the device for the
  rest of the session and the send socket is connected to it. Guide commands
  are sent three times to the device.

Discovery happens on the listener thread while guide commands come in on the
caller thread, a single lock guards the device address, the state and the
connected destination of the send socket. Disconnecting resets the session to
its initial state, connecting again starts a fresh discovery.
"""
import logging
import socket
import threading
from typing import List, Optional, Union

from opensynscan_helper import (
  Address,
  DatagramFromAddress,
  InvalidValueError,
  NotConnectedError,
  SessionStartError,
)

from .DiscoveryListener import DiscoveryListener
from .GuideSender import GuideSender
from .GuideTracker import GuideTracker
from .SequenceCounter import SequenceCounter
from .Settings import Settings
from .State import State
from .packet import Beacon, GuideDirection, GuidePacket, Packet


class Session:
    MAX_DURATION_MS = 0xFFFFFFFF

    def __init__(
        self,
        settings: Optional[Settings] = None,
        tracker: Optional[GuideTracker] = None
    ) -> None:
        self.settings = settings or Settings()
        self.tracker = tracker or GuideTracker()
        self.sequence = SequenceCounter()

        self.guide_rate_ra = float(self.settings.get("guide_rate")["ra"])
        self.guide_rate_dec = float(self.settings.get("guide_rate")["dec"])

        self.device: Optional[Address] = None
        self.state = State.DISCONNECTED

        self.datagram_history: List[DatagramFromAddress] = []
        self.datagram_history_length = 50

        self._lock = threading.Lock()
        self._discovered = threading.Event()
        self._open = False

        self._send_socket: Optional[socket.socket] = None
        self._receive_socket: Optional[socket.socket] = None
        self._sender: Optional[GuideSender] = None
        self._listener: Optional[DiscoveryListener] = None

    def __enter__(self) -> "Session":
        self.connect()
        return self

    def __exit__(self, *exc: object) -> None:
        self.disconnect()

    def _bind_socket(self, port: int, broadcast: bool = False) -> socket.socket:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            if broadcast:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            sock.bind((self.settings.get("bind_address"), port))
        except OSError as e:
            sock.close()
            raise SessionStartError(port, e) from e

        logging.info(f"Bound UDP socket to {sock.getsockname()}")
        return sock

    def connect(self) -> None:
        with self._lock:
            if self._open:
                return

            send_socket = self._bind_socket(self.settings.command_port, broadcast=True)
            try:
                receive_socket = self._bind_socket(self.settings.discovery_port)
            except SessionStartError:
                send_socket.close()
                raise

            broadcast = (
                self.settings.get("broadcast_address"),
                self.settings.command_port
            )

            self._send_socket = send_socket
            self._receive_socket = receive_socket
            self._sender = GuideSender(
                send_socket,
                broadcast,
                self.guide_rate_ra,
                self.guide_rate_dec,
                self.sequence
            )
            self._listener = DiscoveryListener(
                receive_socket,
                self.datagram_handler,
                self.settings.get("receive_timeout_ms")
            )

            self.device = None
            self._discovered.clear()
            self._open = True
            self.handle_state_change(State.UNDISCOVERED)

            self._listener.start()

    def disconnect(self) -> None:
        with self._lock:
            if not self._open:
                return

            self._open = False
            self.device = None
            self._discovered.clear()
            self.handle_state_change(State.DISCONNECTED)

            listener = self._listener
            send_socket = self._send_socket
            receive_socket = self._receive_socket

            self._listener = None
            self._sender = None
            self._send_socket = None
            self._receive_socket = None

        # Joined outside the lock, the handler might be waiting for it
        if listener is not None:
            listener.stop()
            listener.join()

        for sock in (send_socket, receive_socket):
            if sock is not None:
                sock.close()

        logging.info("Session closed")

    def is_connected(self) -> bool:
        return self._open

    def handle_state_change(self, new_state: State) -> None:
        logging.debug(f"State changed from '{self.state}' to '{new_state}'")
        self.state = new_state

    @property
    def discovery_address(self) -> Optional[Address]:
        if self._receive_socket is None:
            return None

        return self._receive_socket.getsockname()

    @property
    def command_address(self) -> Optional[Address]:
        if self._send_socket is None:
            return None

        return self._send_socket.getsockname()

    def datagram_handler(self, data: bytes, addr: Address) -> None:
        """
        Called by the listener for every datagram. The first beacon binds its
        sender as the device, everything else is dropped. Never raises.
        """
        with self._lock:
            if not self._open:
                logging.debug(f"Session closed, dropping datagram from {addr}")
                return

            self.datagram_history.append(DatagramFromAddress(data, addr))
            self.datagram_history = self.datagram_history[-self.datagram_history_length:]

            if self.device is not None:
                logging.debug(f"Already discovered, dropping {Packet.peek_type(data)} from {addr}")
                return

            try:
                packet = Packet.from_bytes(data)
            except ValueError as e:
                logging.debug(f"Dropping datagram from {addr}: {e}")
                return

            if not isinstance(packet, Beacon):
                logging.debug(f"Dropping {packet.type} from {addr}")
                return

            try:
                self._send_socket.connect(addr)
            except OSError as e:
                logging.error(f"Could not connect to {addr}: {e}")
                return

            self.device = addr
            self._discovered.set()
            self.handle_state_change(State.DISCOVERED)

        logging.info(f"OpenSynscan discovered at {addr[0]}:{addr[1]}")

    def wait_for_device(self, timeout: Optional[float] = None) -> Optional[Address]:
        self._discovered.wait(timeout)
        return self.device

    def pulse_guide(
        self,
        direction: Union[GuideDirection, int],
        duration_ms: int
    ) -> GuidePacket:
        try:
            direction = GuideDirection(direction)
        except ValueError as e:
            raise InvalidValueError(f"Invalid guide direction: {direction}") from e

        if (
            isinstance(duration_ms, bool) or
            not isinstance(duration_ms, int) or
            not 0 <= duration_ms <= self.MAX_DURATION_MS
        ):
            raise InvalidValueError(f"Invalid guide duration: {duration_ms}")

        logging.debug(f"PulseGuide {direction.name} for {duration_ms} ms")

        with self._lock:
            if not self._open:
                raise NotConnectedError("pulse_guide")

            packet = self._sender.send(direction, duration_ms, self.device)

        self.tracker.update(duration_ms)

        return packet

    def is_guiding(self) -> bool:
        return self.tracker.is_guiding()
