"""
Packets are fixed size and carry no framing, the UDP datagram boundary
delimits them. The first byte (the marker) identifies the packet family, every
subclass declares its own MARKER and is registered automatically so incoming
datagrams can be dispatched on it.
"""

import abc
from typing import Dict, Type


class Packet(abc.ABC):
    """Abstract Base Class for all packets with built-in serialization."""

    MARKER: int
    _registry: Dict[int, Type["Packet"]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Automatically register subclasses using their marker byte."""
        super().__init_subclass__(**kwargs)
        Packet._registry[cls.MARKER] = cls

    @abc.abstractmethod
    def to_bytes(self) -> bytes:
        pass

    @classmethod
    @abc.abstractmethod
    def decode(cls, data: bytes) -> "Packet":
        pass

    @classmethod
    def from_bytes(cls, data: bytes) -> "Packet":
        """Dynamically deserialize bytes into the correct packet subclass."""
        if not data:
            raise ValueError("Empty packet")

        marker = data[0]
        if marker not in cls._registry:
            raise ValueError(f"Unknown packet marker: 0x{marker:02x}")

        return cls._registry[marker].decode(data)

    @staticmethod
    def peek_type(data: bytes) -> str:
        if data and data[0] in Packet._registry:
            return Packet._registry[data[0]].__name__

        return "Unknown"

    @property
    def type(self) -> str:
        return self.__class__.__name__
