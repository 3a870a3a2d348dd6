import unittest
from unittest import mock

from pydantic import ValidationError

from payload_inference import AccessPoint, Location
from payload_inference.Core.config import Settings


class TestAccessPointSchema(unittest.TestCase):
    def test_mac(self):
        point = AccessPoint(bssid=bytes([0xFC, 0xF5, 0x28, 0x7B, 0x07, 0xE5]), rssi=-80.0)
        self.assertEqual(point.mac, "fc:f5:28:7b:07:e5")

    def test_bssid_length(self):
        with self.assertRaises(ValidationError):
            AccessPoint(bssid=b"\x01\x02\x03", rssi=-80.0)

    def test_frozen(self):
        point = AccessPoint(bssid=b"\x00" * 6, rssi=-80.0)
        with self.assertRaises(ValidationError):
            point.rssi = -10.0


class TestLocationConstraints(unittest.TestCase):
    def test_out_of_range(self):
        with self.assertRaises(ValidationError):
            Location(latitude=90.5, longitude=0.0)
        with self.assertRaises(ValidationError):
            Location(latitude=0.0, longitude=181.0)

    def test_defaults(self):
        loc = Location(latitude=1.0, longitude=2.0)
        self.assertEqual((loc.altitude, loc.accuracy), (0.0, 0.0))


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict("os.environ", {}, clear=True):
            config = Settings()
        self.assertFalse(config.LOCATION_HDOP_AS_ACCURACY)
        self.assertEqual(config.PROJECT_NAME, "payload-inference")

    def test_environment_override_is_case_insensitive(self):
        with mock.patch.dict("os.environ", {"location_hdop_as_accuracy": "true"}, clear=True):
            config = Settings()
        self.assertTrue(config.LOCATION_HDOP_AS_ACCURACY)


if __name__ == "__main__":
    unittest.main()
