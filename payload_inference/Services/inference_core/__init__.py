# payload_inference/Services/inference_core/__init__.py
"""
Inference Core Module
=====================
Rule-based extractors for telemetry carried by decoded device messages.

Components:
- packet_parser: Parsing of decoded payload text with robust fallbacks
- normalizers: Failure-returning accessors for dynamically-typed values
- location: Geographic location inference
- wifi: WiFi access point inference
- gnss: Raw GNSS payload inference

The three inferrers are independent pure functions; call whichever ones
are relevant, in any order, from any thread.
"""

from .packet_parser import parse_decoded_payload, _extract_json_candidate
from .normalizers import (
    as_number,
    as_string,
    as_mapping,
    as_sequence,
    decode_hex,
    parse_bssid
)
from .location import (
    ACCURACY_KEYS,
    HDOP_KEYS,
    LOCATION_KEY_TRIPLES,
    build_location,
    infer_location
)
from .wifi import WIFI_CONVENTIONS, WiFiConvention, infer_wifi_access_points
from .gnss import GNSS_KEYS, infer_gnss

__all__ = [
    # Packet parser
    'parse_decoded_payload',
    '_extract_json_candidate',

    # Normalizers
    'as_number',
    'as_string',
    'as_mapping',
    'as_sequence',
    'decode_hex',
    'parse_bssid',

    # Location - Constants
    'ACCURACY_KEYS',
    'HDOP_KEYS',
    'LOCATION_KEY_TRIPLES',

    # Location - Functions
    'build_location',
    'infer_location',

    # WiFi
    'WIFI_CONVENTIONS',
    'WiFiConvention',
    'infer_wifi_access_points',

    # GNSS
    'GNSS_KEYS',
    'infer_gnss',
]
