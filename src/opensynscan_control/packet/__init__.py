from .Packet import Packet
from .Beacon import Beacon
from .GuideDirection import GuideDirection
from .GuidePacket import GuidePacket

__all__ = [
  "Packet",
  "Beacon",
  "GuideDirection",
  "GuidePacket",
]
