# payload_inference/Schemas/location.py

from pydantic import BaseModel, ConfigDict, Field


"""
Geographic location inferred from a decoded device message.
Field constraints carry the validity rule: every field is finite,
latitude is within [-90, 90] and longitude within [-180, 180].
"""
class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False, description="Longitude in decimal degrees")
    altitude: float = Field(0.0, allow_inf_nan=False, description="Altitude in meters")
    accuracy: float = Field(0.0, allow_inf_nan=False, description="Horizontal accuracy in meters")

    def __str__(self) -> str:
        return f"{self.latitude:f} {self.longitude:f} {self.altitude:f}m ±{self.accuracy:f}m"
