# payload_inference/Services/inference_core/wifi.py
"""
WiFi Access Point Inference Module
==================================
Infers WiFi access point observations from a decoded device message.

Two schema conventions are known (see WIFI_CONVENTIONS). They are tried in
a fixed priority order, and the first one whose array key is present
decides the result: a single malformed element rejects the whole call.
"""

import logging
from collections.abc import Mapping
from typing import Any, List, NamedTuple, Optional, Tuple

from pydantic import ValidationError

from payload_inference.Schemas.access_point import AccessPoint
from .normalizers import as_mapping, as_number, as_sequence, as_string, parse_bssid

logger = logging.getLogger(__name__)


class WiFiConvention(NamedTuple):
    array_key: str
    bssid_key: str
    rssi_key: str


WIFI_CONVENTIONS: Tuple[WiFiConvention, ...] = (
    WiFiConvention(array_key="access_points", bssid_key="bssid", rssi_key="rssi"),
    WiFiConvention(array_key="wifi", bssid_key="mac", rssi_key="rssi"),
)
"""Known access point schemas, in priority order."""


def _parse_access_point(entry: Any, convention: WiFiConvention) -> Optional[AccessPoint]:
    ap = as_mapping(entry)
    if ap is None:
        return None

    bssid_str = as_string(ap.get(convention.bssid_key))
    if bssid_str is None:
        return None
    bssid = parse_bssid(bssid_str)
    if bssid is None:
        return None

    rssi = as_number(ap.get(convention.rssi_key))
    if rssi is None:
        return None

    try:
        return AccessPoint(bssid=bssid, rssi=rssi)
    except ValidationError as ve:
        logger.debug("[WIFI] Rejected access point %r: %s", entry, ve)
        return None


def infer_wifi_access_points(message: Any) -> Tuple[Optional[List[AccessPoint]], bool]:
    """
    Infers the WiFi access points of a decoded message.

    The following structures are recognized, in this order:
    - `access_points`: array of objects with the BSSID in `bssid` and the
      RSSI in `rssi`.
    - `wifi`: array of objects with the BSSID in `mac` and the RSSI in
      `rssi`.

    BSSIDs are hexadecimal; separators such as - and : are stripped before
    parsing. Once a convention's array is present the other one is not
    consulted, even if the array turns out to be malformed.

    Args:
        message: Decoded message (mapping of string keys to JSON values)

    Returns:
        (list of AccessPoint, True) when an array is found and every element
        parses (an empty array gives ([], True)),
        (None, False) otherwise

    Examples:
        >>> points, ok = infer_wifi_access_points(
        ...     {"wifi": [{"mac": "a0b3ccd358e6", "rssi": -92.0}]}
        ... )
        >>> ok, points[0].mac, points[0].rssi
        (True, 'a0:b3:cc:d3:58:e6', -92.0)
    """
    if not isinstance(message, Mapping) or not message:
        return None, False

    for convention in WIFI_CONVENTIONS:
        entries = as_sequence(message.get(convention.array_key))
        if entries is None:
            continue

        points: List[AccessPoint] = []
        for index, entry in enumerate(entries):
            point = _parse_access_point(entry, convention)
            if point is None:
                logger.debug(
                    "[WIFI] Malformed entry %d in '%s', rejecting all access points",
                    index, convention.array_key
                )
                return None, False
            points.append(point)
        return points, True

    return None, False
