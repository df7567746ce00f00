"""
Driver facing surface of the pulse guide client.

Only the members that reach into the session are implemented here. The
guide rates can be read, writing them is accepted and logged but the value in
use does not change, the controller firmware is only ever sent the session
default.
"""
import logging
from importlib.metadata import version, PackageNotFoundError
from typing import Optional

from .GuideTracker import GuideTracker
from .Session import Session
from .Settings import Settings
from .packet import GuideDirection


class Telescope:
    NAME = "OpenSynscan"
    DESCRIPTION = "Pulse Guide for OpenSynscan"
    INTERFACE_VERSION = 3

    def __init__(
        self,
        settings: Optional[Settings] = None,
        tracker: Optional[GuideTracker] = None
    ) -> None:
        self.session = Session(settings, tracker)

    @property
    def connected(self) -> bool:
        connected = self.session.is_connected()
        logging.debug(f"Connected Get {connected}")
        return connected

    @connected.setter
    def connected(self, value: bool) -> None:
        logging.debug(f"Connected Set {value}")
        if value == self.session.is_connected():
            return

        if value:
            logging.info("Connecting to telescope")
            self.session.connect()
        else:
            logging.info("Disconnecting from telescope")
            self.session.disconnect()

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def description(self) -> str:
        return self.DESCRIPTION

    @property
    def driver_version(self) -> str:
        try:
            return version("opensynscan-guide")
        except PackageNotFoundError:
            return "unknown"

    @property
    def interface_version(self) -> int:
        return self.INTERFACE_VERSION

    @property
    def can_pulse_guide(self) -> bool:
        return True

    @property
    def can_set_guide_rates(self) -> bool:
        return True

    @property
    def guide_rate_right_ascension(self) -> float:
        rate = self.session.guide_rate_ra
        logging.debug(f"GuideRateRightAscension Get {rate}")
        return rate

    @guide_rate_right_ascension.setter
    def guide_rate_right_ascension(self, value: float) -> None:
        logging.debug(f"GuideRateRightAscension Set {self.session.guide_rate_ra} => {value}")

    @property
    def guide_rate_declination(self) -> float:
        rate = self.session.guide_rate_dec
        logging.debug(f"GuideRateDeclination Get {rate}")
        return rate

    @guide_rate_declination.setter
    def guide_rate_declination(self, value: float) -> None:
        logging.debug(f"GuideRateDeclination Set {self.session.guide_rate_dec} => {value}")

    @property
    def is_pulse_guiding(self) -> bool:
        guiding = self.session.is_guiding()
        logging.debug(f"IsPulseGuiding Get {guiding}")
        return guiding

    def pulse_guide(self, direction: GuideDirection, duration: int) -> None:
        logging.debug(f"PulseGuide Direction => {direction}, Duration => {duration} msec.")
        self.session.pulse_guide(direction, duration)

    def dispose(self) -> None:
        self.session.disconnect()
