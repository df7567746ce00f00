from .DiscoveryListener import DiscoveryListener
from .GuideSender import GuideSender
from .GuideTracker import GuideTracker
from .SequenceCounter import SequenceCounter
from .Session import Session
from .Settings import Settings
from .State import State
from .Telescope import Telescope

__all__ = [
    "DiscoveryListener",
    "GuideSender",
    "GuideTracker",
    "SequenceCounter",
    "Session",
    "Settings",
    "State",
    "Telescope",
]
