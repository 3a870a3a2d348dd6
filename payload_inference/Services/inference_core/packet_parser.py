# payload_inference/Services/inference_core/packet_parser.py
"""
Decoded Payload Parser Module
=============================
Turns the textual output of an upstream payload decoder into the message
mapping consumed by the inferrers.

The upstream decoder (out of scope) emits a JSON object. Devices and
gateways are not always careful about encoding, so parsing goes through
progressively more permissive fallbacks:

1. Decode UTF-8 normally
2. Decode UTF-8 replacing invalid bytes
3. Extract the outermost JSON object
4. Replace single quotes with double quotes

This module does not decode binary device frames.
"""

import json
import logging
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)


def _extract_json_candidate(s: str) -> str:
    """
    Extracts the outermost JSON object of a string.

    Useful when the payload carries garbage before or after the JSON.

    Examples:
        >>> _extract_json_candidate('garbage{"nav":"aabb"}more garbage')
        '{"nav":"aabb"}'
        >>> _extract_json_candidate('no json here')
        'no json here'
    """
    start = s.find('{')
    end = s.rfind('}')
    if start != -1 and end != -1 and end > start:
        return s[start:end+1]
    return s


def _loads_object(text: str) -> Dict[str, Any]:
    payload = json.loads(text)
    if not isinstance(payload, dict):
        raise ValueError(f"Decoded payload is a JSON {type(payload).__name__}, expected an object")
    return payload


def parse_decoded_payload(data: Union[bytes, str]) -> Dict[str, Any]:
    """
    Parses a decoded payload (JSON object) with several fallbacks.

    Args:
        data: Raw bytes or text produced by the upstream decoder

    Returns:
        dict: The parsed message, ready for infer_location(),
        infer_wifi_access_points() and infer_gnss()

    Raises:
        ValueError: If no fallback produces a JSON object

    Examples:
        >>> parse_decoded_payload(b'{"lat": 1.5, "lon": 2.5}')
        {'lat': 1.5, 'lon': 2.5}
        >>> parse_decoded_payload("{'nav': 'aabb'}")
        {'nav': 'aabb'}
    """
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8").strip()
        except UnicodeDecodeError:
            text = data.decode("utf-8", errors="replace").strip()
            logger.warning("[PARSER] Decode replaced invalid bytes")
    else:
        text = data.strip()

    # Byte Order Mark
    text = text.lstrip("\ufeff").strip()

    try:
        return _loads_object(text)
    except json.JSONDecodeError:
        pass

    candidate = _extract_json_candidate(text)
    if candidate != text:
        try:
            payload = _loads_object(candidate)
            logger.warning("[PARSER] Used JSON extraction fallback")
            return payload
        except json.JSONDecodeError:
            pass

    try:
        payload = _loads_object(candidate.replace("'", '"'))
        logger.warning("[PARSER] Used quote replacement fallback")
        return payload
    except json.JSONDecodeError as jde:
        raise ValueError(f"JSON decode failed after all fallbacks: {jde}") from jde
