from enum import IntEnum


class GuideDirection(IntEnum):
    """Wire codes for the four pulse directions."""
    NORTH = 0  # +DEC
    SOUTH = 1  # -DEC
    EAST = 2   # +RA
    WEST = 3   # -RA

    def is_ra(self) -> bool:
        return self in (GuideDirection.EAST, GuideDirection.WEST)
