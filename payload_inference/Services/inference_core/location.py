# payload_inference/Services/inference_core/location.py
"""
Location Inference Module
=========================
Infers a geographic location from a decoded device message.

Decoders name positional fields in many ways. Recognition goes from coarse
to fine:

1. Grouped keys: a key of the form gps_# (CayenneLPP in The Things Stack)
   whose value is an object with latitude/longitude/altitude.
2. Flat keys: one of LOCATION_KEY_TRIPLES, tried in priority order, plus
   an accuracy key from ACCURACY_KEYS.

Every candidate goes through the Location schema, so an out-of-range or
non-finite position is never returned, whichever pass produced it.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError

from payload_inference.Core.config import settings
from payload_inference.Schemas.location import Location
from .normalizers import as_mapping, as_number

logger = logging.getLogger(__name__)


# ==========================================================
# CONSTANTES DE MAPEO
# ==========================================================

GPS_KEY_RE = re.compile(r"gps_([0-9]+)")
"""Matches grouped location keys such as gps_5. Compiled once, read-only."""

LOCATION_KEY_TRIPLES: Tuple[Tuple[str, str, str], ...] = (
    ("lat", "lon", "alt"),
    ("lat", "lng", "alt"),
    ("lat", "long", "alt"),
    ("latitude", "longitude", "altitude"),
    ("Latitude", "Longitude", "Altitude"),
    ("latitudeDeg", "longitudeDeg", "altitude"),
    ("latitudeDeg", "longitudeDeg", "height"),
    ("gps_lat", "gps_lng", "gps_alt"),
    ("gps_lat", "gps_lng", "gpsalt"),
)
"""
(latitude, longitude, altitude) key names, in priority order.
The first triple with numeric latitude and longitude wins.
"""

ACCURACY_KEYS: Tuple[str, ...] = (
    "acc",
    "accuracy",
    "hacc",  # horizontal accuracy
)
"""Accuracy keys in metres, in priority order."""

HDOP_KEYS: Tuple[str, ...] = (
    "hdop",
    "gps_hdop",
)
"""Horizontal dilution of precision keys, used only when HDOP is an accuracy proxy."""


# ==========================================================
# FUNCIONES DE BAJO NIVEL
# ==========================================================

def build_location(
    latitude: float,
    longitude: float,
    altitude: float = 0.0,
    accuracy: float = 0.0
) -> Optional[Location]:
    """
    Builds a Location, returning None when it violates the validity rule.

    The rule (finite fields, latitude within [-90, 90], longitude within
    [-180, 180]) is enforced by the Location schema itself.
    """
    try:
        return Location(
            latitude=latitude,
            longitude=longitude,
            altitude=altitude,
            accuracy=accuracy,
        )
    except ValidationError as ve:
        logger.debug("[LOCATION] Rejected invalid location: %s", ve)
        return None


def _grouped_keys(message: Mapping) -> List[str]:
    """Returns the gps_# keys of the message ordered by numeric suffix."""
    keys = []
    for key in message:
        if not isinstance(key, str):
            continue
        match = GPS_KEY_RE.fullmatch(key)
        if match:
            keys.append((int(match.group(1)), key))
    return [key for _, key in sorted(keys)]


def _infer_grouped(message: Mapping) -> Optional[Location]:
    for key in _grouped_keys(message):
        group = as_mapping(message[key])
        if group is None:
            continue

        location = build_location(
            latitude=as_number(group.get("latitude")) or 0.0,
            longitude=as_number(group.get("longitude")) or 0.0,
            altitude=as_number(group.get("altitude")) or 0.0,
        )
        if location is not None:
            return location

    return None


def _infer_flat(message: Mapping, hdop_as_accuracy: bool) -> Optional[Location]:
    for lat_key, lon_key, alt_key in LOCATION_KEY_TRIPLES:
        lat = as_number(message.get(lat_key))
        lon = as_number(message.get(lon_key))
        if lat is None or lon is None:
            continue
        # 0,0 is the "no fix" sentinel of most trackers
        if lat == 0 and lon == 0:
            continue
        alt = as_number(message.get(alt_key)) or 0.0
        break
    else:
        return None

    accuracy_keys = ACCURACY_KEYS + HDOP_KEYS if hdop_as_accuracy else ACCURACY_KEYS
    accuracy = 0.0
    for key in accuracy_keys:
        value = as_number(message.get(key))
        if value is not None:
            accuracy = value
            break

    return build_location(lat, lon, alt, accuracy)


# ==========================================================
# FUNCIÓN DE ALTO NIVEL
# ==========================================================

def infer_location(
    message: Any,
    hdop_as_accuracy: Optional[bool] = None
) -> Tuple[Optional[Location], bool]:
    """
    Infers the location of a decoded message using predefined key rules.

    If the message contains keys with the format gps_#, their values are
    assumed to be objects with latitude, longitude and altitude. Keys are
    visited by ascending suffix (gps_1 before gps_10) and the first valid
    location wins.

    Otherwise, the following key combinations for latitude, longitude and
    altitude are checked, in order:
      - lat, lon, alt
      - lat, lng, alt
      - lat, long, alt
      - latitude, longitude, altitude
      - Latitude, Longitude, Altitude
      - latitudeDeg, longitudeDeg, altitude
      - latitudeDeg, longitudeDeg, height
      - gps_lat, gps_lng, gps_alt
      - gps_lat, gps_lng, gpsalt
    And the following keys for accuracy in metres: acc, accuracy, hacc
    (then hdop, gps_hdop when HDOP is used as an accuracy proxy).

    Args:
        message: Decoded message (mapping of string keys to JSON values)
        hdop_as_accuracy: Override for settings.LOCATION_HDOP_AS_ACCURACY

    Returns:
        (Location, True) when a valid location is found,
        (None, False) otherwise

    Examples:
        >>> infer_location({"lat": 1.0, "lon": 2.0})
        (Location(latitude=1.0, longitude=2.0, altitude=0.0, accuracy=0.0), True)
        >>> infer_location({"lat": 0.0, "lon": 0.0})
        (None, False)
    """
    if not isinstance(message, Mapping) or not message:
        return None, False

    if hdop_as_accuracy is None:
        hdop_as_accuracy = settings.LOCATION_HDOP_AS_ACCURACY

    location = _infer_grouped(message)
    if location is None:
        location = _infer_flat(message, hdop_as_accuracy)

    if location is None:
        return None, False
    return location, True
