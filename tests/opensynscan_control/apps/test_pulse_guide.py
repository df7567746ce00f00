import io
import sys
import tomllib
import unittest
from unittest.mock import patch, MagicMock

from opensynscan_control.apps import pulse_guide
from opensynscan_control.packet import GuideDirection


class TestPulseGuideApp(unittest.TestCase):
    def run_main(self, *argv: str):
        with patch.object(sys, "argv", ["opensynscan-pulse-guide", *argv]):
            pulse_guide.main()

    def test_print_config(self):
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            self.run_main("--print-config")

        config = tomllib.loads(stdout.getvalue())
        self.assertEqual(config["ports"]["command"], 5002)

    def test_missing_arguments(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                self.run_main("north")

    @patch("opensynscan_control.apps.pulse_guide.signal")
    @patch("opensynscan_control.apps.pulse_guide.Session")
    def test_sends_pulse(self, mock_session_cls, mock_signal):
        session = MagicMock()
        session.wait_for_device.return_value = ("192.168.4.1", 5002)
        session.tracker.remaining.return_value = 0
        mock_session_cls.return_value = session

        self.run_main("east", "250", "--wait", "0.1", "--log", "error")

        session.connect.assert_called_once()
        session.pulse_guide.assert_called_once_with(GuideDirection.EAST, 250)
        session.disconnect.assert_called_once()

    def test_invalid_log_level(self):
        with self.assertRaises(ValueError):
            self.run_main("east", "250", "--log", "loud")


if __name__ == "__main__":
    unittest.main()
