import unittest
from unittest.mock import MagicMock

from opensynscan_control import GuideTracker, Telescope
from opensynscan_control.packet import GuideDirection
from opensynscan_helper import NotConnectedError
from tests.opensynscan_control.config import FakeClock, make_settings


class TestTelescope(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.telescope = Telescope(make_settings(), GuideTracker(self.clock))

    def tearDown(self):
        self.telescope.dispose()

    def test_static_properties(self):
        self.assertEqual(self.telescope.name, "OpenSynscan")
        self.assertEqual(self.telescope.description, "Pulse Guide for OpenSynscan")
        self.assertEqual(self.telescope.interface_version, 3)
        self.assertTrue(self.telescope.can_pulse_guide)
        self.assertTrue(self.telescope.can_set_guide_rates)
        self.assertIsInstance(self.telescope.driver_version, str)

    def test_connected_toggles_session(self):
        self.assertFalse(self.telescope.connected)

        self.telescope.connected = True
        self.assertTrue(self.telescope.connected)
        self.assertTrue(self.telescope.session.is_connected())

        self.telescope.connected = True
        self.assertTrue(self.telescope.connected)

        self.telescope.connected = False
        self.assertFalse(self.telescope.connected)

    def test_pulse_guide_sets_is_pulse_guiding(self):
        self.telescope.connected = True
        self.telescope.session._sender.socket = MagicMock()

        self.telescope.pulse_guide(GuideDirection.EAST, 500)

        self.assertTrue(self.telescope.is_pulse_guiding)
        self.clock.now = 0.5
        self.assertFalse(self.telescope.is_pulse_guiding)

    def test_pulse_guide_requires_connection(self):
        with self.assertRaises(NotConnectedError):
            self.telescope.pulse_guide(GuideDirection.NORTH, 100)

    def test_guide_rate_setters_are_inert(self):
        # Setting a guide rate is accepted but never applied, the session
        # keeps sending its default rate.
        self.assertEqual(self.telescope.guide_rate_right_ascension, 0.7)
        self.assertEqual(self.telescope.guide_rate_declination, 0.7)

        self.telescope.guide_rate_right_ascension = 1.2
        self.telescope.guide_rate_declination = 0.1

        self.assertEqual(self.telescope.guide_rate_right_ascension, 0.7)
        self.assertEqual(self.telescope.guide_rate_declination, 0.7)

        self.telescope.connected = True
        self.telescope.session._sender.socket = MagicMock()
        self.telescope.pulse_guide(GuideDirection.WEST, 100)
        data = self.telescope.session._sender.socket.sendto.call_args.args[0]
        self.assertEqual(data[7], 7)

    def test_dispose_disconnects(self):
        self.telescope.connected = True
        self.telescope.dispose()
        self.assertFalse(self.telescope.connected)


if __name__ == "__main__":
    unittest.main()
