from .Packet import Packet


class Beacon(Packet):
    """
    Presence announcement broadcast by the controller. The controller sends
    two bytes, only the marker is meaningful.
    """
    MARKER = 0x36
    SIZE = 2

    def to_bytes(self) -> bytes:
        return bytes([self.MARKER]) + bytes(self.SIZE - 1)

    @classmethod
    def decode(cls, data: bytes) -> "Beacon":
        if not data or data[0] != cls.MARKER:
            raise ValueError("Not a beacon")

        return cls()

    def __repr__(self) -> str:
        return "Beacon()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Beacon)
