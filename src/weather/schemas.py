"""
OpenWeather query parameter schema
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, field_validator

VALID_UNITS = ("standard", "metric", "imperial")


class WeatherQuery(BaseModel):
    """Query parameters for the One Call API, in request order"""

    lat: float = Field(..., ge=-90, le=90, description="Latitude of the location")
    lon: float = Field(..., ge=-180, le=180, description="Longitude of the location")
    appid: str = Field(..., min_length=1, description="OpenWeather API key")
    units: str = Field("metric", description="standard, metric or imperial")
    exclude: Optional[str] = Field(
        None, description="Comma separated blocks to leave out of the response"
    )
    lang: Optional[str] = Field(None, description="Language of text descriptions")

    @field_validator("units")
    @classmethod
    def validate_units(cls, v):
        """Only the unit systems OpenWeather understands"""
        if v not in VALID_UNITS:
            raise ValueError(f"units must be one of {', '.join(VALID_UNITS)}")
        return v

    def to_params(self) -> Dict[str, Any]:
        """Parameters ready for encode_parameters, unset optionals dropped"""
        return self.model_dump(exclude_none=True)
