"""
Guide command layout (8 bytes):

  0     marker (0x35)
  1     sequence, wraps at 256
  2     direction code
  3-6   duration in milliseconds, unsigned 32 bit little endian
  7     guide rate in tenths of deg/s

The rate byte is truncated, anything outside 0.0 - 25.5 deg/s wraps around
and is not validated. Non-finite rates are sent as 0.
"""
import math
import struct

from .GuideDirection import GuideDirection
from .Packet import Packet


class GuidePacket(Packet):
    MARKER = 0x35
    FORMAT = "<BBBIB"
    SIZE = struct.calcsize(FORMAT)

    def __init__(
        self,
        sequence: int,
        direction: GuideDirection,
        duration_ms: int,
        rate: float
    ) -> None:
        self.sequence = sequence & 0xFF
        self.direction = GuideDirection(direction)
        self.duration_ms = duration_ms
        self.rate = rate

    @staticmethod
    def rate_to_byte(rate: float) -> int:
        if not math.isfinite(rate):
            return 0

        return int(rate * 10.0) & 0xFF

    def to_bytes(self) -> bytes:
        return struct.pack(
            self.FORMAT,
            self.MARKER,
            self.sequence,
            int(self.direction),
            self.duration_ms & 0xFFFFFFFF,
            self.rate_to_byte(self.rate)
        )

    @classmethod
    def decode(cls, data: bytes) -> "GuidePacket":
        if len(data) != cls.SIZE:
            raise ValueError(f"Guide packet must be {cls.SIZE} bytes, got {len(data)}")

        marker, sequence, direction, duration_ms, rate = struct.unpack(cls.FORMAT, data)
        if marker != cls.MARKER:
            raise ValueError("Not a guide packet")

        try:
            direction = GuideDirection(direction)
        except ValueError as e:
            raise ValueError(f"Unknown guide direction: {direction}") from e

        return cls(sequence, direction, duration_ms, rate / 10.0)

    def __repr__(self) -> str:
        return (
            f"GuidePacket(sequence={self.sequence}, direction={self.direction.name}, "
            f"duration_ms={self.duration_ms}, rate={self.rate})"
        )
