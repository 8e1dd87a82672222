"""
Models for countdown GIF generation requests.
These models define the expected structure of the JSON body posted to /generate-gif.
"""

from pydantic import BaseModel, Field, StrictInt, field_validator
from typing import Literal

DEFAULT_LABELS = {
    "days": "Days",
    "hours": "Hours",
    "minutes": "Minutes",
    "seconds": "Seconds",
}


class CountdownConfig(BaseModel):
    """
    Styling and unit preferences for a countdown timer.
    """
    display_days: bool = Field(default=True, description="Whether to render a days box")
    display_hours: bool = Field(default=True, description="Whether to render an hours box")
    label_days: str = Field(default=DEFAULT_LABELS["days"], description="Caption under the days value")
    label_hours: str = Field(default=DEFAULT_LABELS["hours"], description="Caption under the hours value")
    label_minutes: str = Field(default=DEFAULT_LABELS["minutes"], description="Caption under the minutes value")
    label_seconds: str = Field(default=DEFAULT_LABELS["seconds"], description="Caption under the seconds value")
    template: str = Field(default="square", description="Box shape and layout variant, e.g. rounded-md-border-inside")
    font: str = Field(default="Roboto", description="Registered font family name")
    background_color: str = Field(default="#FFFFFF", description="Canvas fill color")
    box_color: str = Field(default="#FE8A22", description="Box fill/stroke color")
    text_color: str = Field(default="#FFFFFF", description="Digit and label color on filled boxes")
    label_color: str = Field(default="#FE8A22", description="Label color when the label sits below the box")

    class Config:
        # Frontends send extra styling keys we don't render
        extra = "allow"

    @field_validator("*", mode="before")
    @classmethod
    def null_means_default(cls, value, info):
        # JSON null behaves like a missing field
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("label_days", "label_hours", "label_minutes", "label_seconds", "template", "font")
    @classmethod
    def empty_means_default(cls, value, info):
        if value == "":
            return cls.model_fields[info.field_name].default
        return value

    def label_for(self, unit: str) -> str:
        """Return the caption configured for a unit key."""
        return getattr(self, f"label_{unit}")


class GenerateGifRequest(BaseModel):
    """
    Request body for countdown GIF generation.
    """
    config: CountdownConfig = Field(..., description="Countdown styling preferences")
    diffMs: StrictInt = Field(..., description="Milliseconds remaining until the target time")

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "config": {
                    "template": "rounded-md-border-inside",
                    "box_color": "#FE8A22",
                    "display_days": False
                },
                "diffMs": 3723000
            }
        }

    @field_validator("diffMs", mode="before")
    @classmethod
    def whole_float_as_int(cls, value):
        # JSON serializers often emit 5000.0 for integral numbers
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class TemplateTraits(BaseModel):
    """
    Explicit traits parsed from a template token.
    """
    shape: Literal["square", "circle"] = "square"
    corner_radius: int = Field(default=0, ge=0)
    has_border: bool = False
    has_inside_label: bool = False
    digits_only: bool = False


class UnitBox(BaseModel):
    """
    One time unit as rendered in a single frame.
    """
    key: Literal["days", "hours", "minutes", "seconds"]
    label: str
    value: int = Field(..., ge=0)
