# payload_inference/Services/inference_core/normalizers.py
"""
Value Normalizers Module
========================
Accessors that read dynamically-typed values out of a decoded message.

Decoded messages come from many vendors and firmwares, so no field can be
trusted to have the expected type. Every accessor here returns None when
the value does not have the requested shape, and the caller decides whether
to default or to reject.

Functions:
- as_number(): int/float → float (bool and strings are not numbers)
- as_string(): str or None
- as_mapping(): nested object or None
- as_sequence(): JSON array or None
- decode_hex(): strict hexadecimal → bytes
- parse_bssid(): MAC address string → 6 raw bytes
"""

import re
from collections.abc import Mapping
from typing import Any, Optional, Sequence


# ==========================================================
# CONSTANTES
# ==========================================================

BSSID_LENGTH = 6
"""Number of bytes in a BSSID (MAC address)."""

BSSID_SEPARATORS = ("-", ":")
"""Separators stripped from a BSSID before hex decoding."""

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


# ==========================================================
# ACCESSORS
# ==========================================================

def as_number(value: Any) -> Optional[float]:
    """
    Returns the value as float when it holds a JSON number.

    Rules:
    - int/float → float
    - bool → None (JSON true/false are not numbers)
    - int too large for a float → None
    - anything else, numeric strings included → None

    Examples:
        >>> as_number(1)
        1.0
        >>> as_number(-80.5)
        -80.5
        >>> as_number("42") is None
        True
        >>> as_number(True) is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return None
    return None


def as_string(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def as_mapping(value: Any) -> Optional[Mapping]:
    return value if isinstance(value, Mapping) else None


def as_sequence(value: Any) -> Optional[Sequence]:
    """
    Returns the value when it is a JSON array (list or tuple).

    Strings and bytes are sequences in Python but never arrays in a
    decoded message, so they are rejected.
    """
    return value if isinstance(value, (list, tuple)) else None


# ==========================================================
# DECODERS
# ==========================================================

def decode_hex(s: str) -> Optional[bytes]:
    """
    Decodes a hexadecimal string into bytes.

    Unlike bytes.fromhex(), whitespace is not tolerated: the string must be
    an even number of hex digits (case-insensitive). The empty string
    decodes to b"".

    Examples:
        >>> decode_hex("aabbccdd")
        b'\\xaa\\xbb\\xcc\\xdd'
        >>> decode_hex("abc") is None
        True
        >>> decode_hex("aa bb") is None
        True
    """
    if not _HEX_RE.fullmatch(s):
        return None
    return bytes.fromhex(s)


def parse_bssid(s: str) -> Optional[bytes]:
    """
    Parses a hexadecimal BSSID into its 6 raw bytes.

    Separators such as - and : are removed before the conversion takes
    place, and the conversion is case insensitive.

    Examples:
        >>> parse_bssid("14:60:80:9A:19:58") == parse_bssid("1460809a1958")
        True
        >>> parse_bssid("14:60:80:9a:19") is None
        True
    """
    for sep in BSSID_SEPARATORS:
        s = s.replace(sep, "")

    raw = decode_hex(s)
    if raw is None or len(raw) != BSSID_LENGTH:
        return None
    return raw
