# payload_inference/Services/inference_core/gnss.py

import logging
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from .normalizers import as_string, decode_hex

logger = logging.getLogger(__name__)


GNSS_KEYS: Tuple[str, ...] = (
    "nav",
)
"""Keys checked for hexadecimal raw navigation payloads."""


def infer_gnss(message: Any) -> Tuple[Optional[bytes], bool]:
    """
    Infers a raw GNSS payload from a decoded message.

    The payload is expected as a hexadecimal string under one of GNSS_KEYS.
    Its content is vendor specific and is returned as-is.

    Returns:
        (bytes, True) when the value decodes, even to zero bytes,
        (None, False) when the key is absent, not a string, or not valid hex
    """
    if not isinstance(message, Mapping) or not message:
        return None, False

    for key in GNSS_KEYS:
        s = as_string(message.get(key))
        if s is None:
            continue
        payload = decode_hex(s)
        if payload is None:
            logger.debug("[GNSS] Value of '%s' is not valid hexadecimal", key)
            continue
        return payload, True

    return None, False
