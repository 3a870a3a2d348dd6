import unittest

from payload_inference import infer_gnss


class TestGNSSInference(unittest.TestCase):
    def test_table_cases(self):
        cases = [
            ("ValidPayload", {"nav": "aabbccdd"}, b"\xaa\xbb\xcc\xdd", True),
            ("InvalidPayload", {"nav": "aabbccddgg"}, None, False),
            ("NoKey", {"gnss": "aabbccdd"}, None, False),
        ]
        for name, message, expected, ok in cases:
            with self.subTest(name):
                payload, found = infer_gnss(message)
                self.assertEqual(found, ok)
                self.assertEqual(payload, expected)

    def test_empty_message(self):
        self.assertEqual(infer_gnss({}), (None, False))

    def test_empty_string_decodes_to_empty_payload(self):
        self.assertEqual(infer_gnss({"nav": ""}), (b"", True))

    def test_odd_length(self):
        self.assertEqual(infer_gnss({"nav": "aabbc"}), (None, False))

    def test_uppercase_hex(self):
        self.assertEqual(infer_gnss({"nav": "AABBCCDD"}), (b"\xaa\xbb\xcc\xdd", True))

    def test_whitespace_is_not_hex(self):
        self.assertEqual(infer_gnss({"nav": "aa bb"}), (None, False))

    def test_trailing_newline_is_not_hex(self):
        self.assertEqual(infer_gnss({"nav": "aabb\n"}), (None, False))
        self.assertEqual(infer_gnss({"nav": "\n"}), (None, False))

    def test_non_string_value(self):
        self.assertEqual(infer_gnss({"nav": 12}), (None, False))
        self.assertEqual(infer_gnss({"nav": ["aa"]}), (None, False))

    def test_decodes_any_even_length_hex(self):
        for s in ("00", "ff00", "0123456789abcdef", "deadbeef" * 16):
            with self.subTest(s=s):
                self.assertEqual(infer_gnss({"nav": s}), (bytes.fromhex(s), True))


if __name__ == "__main__":
    unittest.main()
