# payload_inference/Schemas/access_point.py

from pydantic import BaseModel, ConfigDict, Field


class AccessPoint(BaseModel):
    """
    Signal description of a single WiFi access point.

    Only produced as part of a complete, validated list of observations;
    see infer_wifi_access_points().
    """
    model_config = ConfigDict(frozen=True)

    bssid: bytes = Field(
        ...,
        min_length=6,
        max_length=6,
        description="Hardware (MAC) address of the access point, 6 raw bytes"
    )

    rssi: float = Field(
        ...,
        description="Received signal strength in dBm (usually negative)"
    )

    @property
    def mac(self) -> str:
        """BSSID as lowercase colon-separated hex, e.g. 'fc:f5:28:7b:07:e5'."""
        return self.bssid.hex(":")
