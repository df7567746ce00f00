from enum import Enum


class State(Enum):
    DISCONNECTED = "disconnected"
    UNDISCOVERED = "undiscovered"
    DISCOVERED = "discovered"
