import unittest

from payload_inference.Services.inference_core.normalizers import (
    as_mapping,
    as_number,
    as_sequence,
    as_string,
    decode_hex,
    parse_bssid,
)


class TestAccessors(unittest.TestCase):
    def test_as_number(self):
        self.assertEqual(as_number(1), 1.0)
        self.assertEqual(as_number(-80.5), -80.5)
        self.assertIsNone(as_number(True))
        self.assertIsNone(as_number("42"))
        self.assertIsNone(as_number(None))
        self.assertIsNone(as_number(10 ** 400))

    def test_as_string(self):
        self.assertEqual(as_string("nav"), "nav")
        self.assertIsNone(as_string(b"nav"))

    def test_as_mapping(self):
        self.assertEqual(as_mapping({"a": 1}), {"a": 1})
        self.assertIsNone(as_mapping([("a", 1)]))

    def test_as_sequence(self):
        self.assertEqual(as_sequence([1, 2]), [1, 2])
        self.assertEqual(as_sequence((1, 2)), (1, 2))
        self.assertIsNone(as_sequence("ab"))
        self.assertIsNone(as_sequence({"a": 1}))


class TestDecoders(unittest.TestCase):
    def test_decode_hex(self):
        self.assertEqual(decode_hex("aabbccdd"), b"\xaa\xbb\xcc\xdd")
        self.assertEqual(decode_hex(""), b"")
        self.assertIsNone(decode_hex("abc"))
        self.assertIsNone(decode_hex("zz"))
        self.assertIsNone(decode_hex("aabb\n"))

    def test_parse_bssid_is_separator_and_case_insensitive(self):
        expected = bytes([0x14, 0x60, 0x80, 0x9A, 0x19, 0x58])
        for s in ("14:60:80:9a:19:58", "14-60-80-9a-19-58", "1460809a1958", "14:60:80:9A:19:58"):
            with self.subTest(s=s):
                self.assertEqual(parse_bssid(s), expected)

    def test_parse_bssid_rejects_bad_input(self):
        for s in (
            "",
            "14:60:80:9a:19",
            "14:60:80:9a:19:58:00",
            "14:60:80:9a:19:5g",
            "14 60 80 9a 19 58",
            "a0b3ccd358e6\n",
        ):
            with self.subTest(s=s):
                self.assertIsNone(parse_bssid(s))


if __name__ == "__main__":
    unittest.main()
