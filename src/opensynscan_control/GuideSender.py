"""
Build guide packets and put them on the wire.

Delivery is best effort. Once the controller is known every packet is sent
three times on the connected socket, there are no acknowledgements and no
retries. Before that a single broadcast is sent to the command port, the
controller may answer it with a beacon.
"""
import logging
import socket
from typing import Optional

from opensynscan_helper import Address

from .SequenceCounter import SequenceCounter
from .packet import GuideDirection, GuidePacket


class GuideSender:
    REPEAT = 3

    def __init__(
        self,
        sock: socket.socket,
        broadcast_address: Address,
        rate_ra: float,
        rate_dec: float,
        sequence: Optional[SequenceCounter] = None
    ) -> None:
        self.socket = sock
        self.broadcast_address = broadcast_address
        self.rate_ra = rate_ra
        self.rate_dec = rate_dec
        self.sequence = sequence or SequenceCounter()

    def rate_for(self, direction: GuideDirection) -> float:
        return self.rate_ra if direction.is_ra() else self.rate_dec

    def build(self, direction: GuideDirection, duration_ms: int) -> GuidePacket:
        return GuidePacket(
            self.sequence.next(),
            direction,
            duration_ms,
            self.rate_for(direction)
        )

    def send(
        self,
        direction: GuideDirection,
        duration_ms: int,
        device: Optional[Address]
    ) -> GuidePacket:
        """
        The socket must already be connected to `device` when one is given,
        the unicast path relies on the default destination of the socket.
        """
        packet = self.build(direction, duration_ms)
        data = packet.to_bytes()

        try:
            if device is not None:
                for _ in range(self.REPEAT):
                    self.socket.send(data)
                logging.debug(f"Sent {packet} to {device[0]}:{device[1]}")
            else:
                self.socket.sendto(data, self.broadcast_address)
                logging.warning(f"OpenSynscan not discovered, broadcast {packet}")

        except OSError as e:
            logging.warning(f"Socket error while sending: {e}")

        return packet
