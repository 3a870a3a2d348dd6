"""
payload_inference
=================

Structured telemetry inference for decoded device messages.

Upstream payload decoders turn raw device frames into generic key/value
structures whose shape varies by vendor and firmware. This library
recognizes which keys carry a known telemetry type and returns a typed,
validated result together with a found flag:

    from payload_inference import infer_location, infer_wifi_access_points, infer_gnss

    location, ok = infer_location({"lat": 52.37, "lon": 4.89, "acc": 12.0})
    points, ok = infer_wifi_access_points({"wifi": [{"mac": "a0b3ccd358e6", "rssi": -92.0}]})
    payload, ok = infer_gnss({"nav": "aabbccdd"})
"""

from payload_inference.Core.config import settings
from payload_inference.Schemas.access_point import AccessPoint
from payload_inference.Schemas.location import Location
from payload_inference.Services.inference_core import (
    infer_gnss,
    infer_location,
    infer_wifi_access_points,
    parse_decoded_payload,
)

__version__ = settings.PROJECT_VERSION

__all__ = [
    "AccessPoint",
    "Location",
    "infer_gnss",
    "infer_location",
    "infer_wifi_access_points",
    "parse_decoded_payload",
    "settings",
]
