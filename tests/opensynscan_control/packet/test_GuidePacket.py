import struct
import unittest

from opensynscan_control.packet import GuideDirection, GuidePacket, Packet


class TestGuidePacket(unittest.TestCase):
    def test_layout_is_byte_exact(self):
        packet = GuidePacket(7, GuideDirection.WEST, 500, 0.7)
        data = packet.to_bytes()

        self.assertEqual(len(data), 8)
        self.assertEqual(data[0], 0x35)
        self.assertEqual(data[1], 7)
        self.assertEqual(data[2], 3)
        self.assertEqual(data[3:7], (500).to_bytes(4, "little"))
        self.assertEqual(data[7], 7)

    def test_direction_codes(self):
        self.assertEqual(GuideDirection.NORTH, 0)
        self.assertEqual(GuideDirection.SOUTH, 1)
        self.assertEqual(GuideDirection.EAST, 2)
        self.assertEqual(GuideDirection.WEST, 3)

        self.assertTrue(GuideDirection.EAST.is_ra())
        self.assertTrue(GuideDirection.WEST.is_ra())
        self.assertFalse(GuideDirection.NORTH.is_ra())
        self.assertFalse(GuideDirection.SOUTH.is_ra())

    def test_decode_recovers_fields(self):
        cases = [
            (GuideDirection.NORTH, 0, 0.0),
            (GuideDirection.SOUTH, 1, 0.5),
            (GuideDirection.EAST, 1500, 0.7),
            (GuideDirection.WEST, 0xFFFFFFFF, 25.5),
        ]
        for direction, duration, rate in cases:
            with self.subTest(direction=direction, duration=duration, rate=rate):
                decoded = Packet.from_bytes(GuidePacket(1, direction, duration, rate).to_bytes())

                self.assertIsInstance(decoded, GuidePacket)
                self.assertEqual(decoded.direction, direction)
                self.assertEqual(decoded.duration_ms, duration)
                self.assertLessEqual(abs(decoded.rate - rate), 0.1)

    def test_rate_truncates(self):
        self.assertEqual(GuidePacket.rate_to_byte(0.79), 7)
        self.assertEqual(GuidePacket.rate_to_byte(25.5), 255)
        # Out of range values wrap silently
        self.assertEqual(GuidePacket.rate_to_byte(25.6), 0)

    def test_non_finite_rate_is_zero(self):
        self.assertEqual(GuidePacket.rate_to_byte(float("inf")), 0)
        self.assertEqual(GuidePacket.rate_to_byte(float("-inf")), 0)
        self.assertEqual(GuidePacket.rate_to_byte(float("nan")), 0)

        data = GuidePacket(1, GuideDirection.EAST, 100, float("inf")).to_bytes()
        self.assertEqual(data[7], 0)

    def test_sequence_is_masked_to_a_byte(self):
        packet = GuidePacket(257, GuideDirection.NORTH, 10, 0.7)
        self.assertEqual(packet.to_bytes()[1], 1)

    def test_decode_rejects_wrong_size(self):
        data = GuidePacket(1, GuideDirection.NORTH, 10, 0.7).to_bytes()
        with self.assertRaises(ValueError):
            GuidePacket.decode(data[:7])
        with self.assertRaises(ValueError):
            GuidePacket.decode(data + b"\x00")

    def test_decode_rejects_unknown_direction(self):
        data = struct.pack("<BBBIB", 0x35, 1, 9, 100, 7)
        with self.assertRaises(ValueError):
            Packet.from_bytes(data)

    def test_repr(self):
        packet = GuidePacket(3, GuideDirection.EAST, 250, 0.7)
        self.assertIn("EAST", repr(packet))
        self.assertIn("250", repr(packet))


if __name__ == "__main__":
    unittest.main()
