"""
Certificate style options.

Parses the optional form fields of POST /generate-certificates. Values are
read leniently: the form comes straight from a browser, so bad numbers fall
back to defaults instead of failing the request.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from certificate_engine import TextStyle

# Leading integer, like "120", "-5", "120px" or "12.7"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

CENTER = "center"


def parse_position(value: Optional[str]) -> int:
    """Return the leading integer of ``value``, or 0 when there is none."""
    if value is None:
        return 0
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


class CertificateOptions(BaseModel):
    """
    Style options for a certificate batch.

    Attributes:
        font_family: Font family name, registered or system
        font_size: Font size in pixels (positive)
        font_color: Any color Pillow understands ("gold", "#ffcc00", "rgb(...)")
        x_position: Left edge of the name, or "center" to center it
        y_position: Baseline of the name
    """

    font_family: str = Field(default="Lato", alias="fontFamily")
    font_size: int = Field(default=80, gt=0, alias="fontSize")
    font_color: str = Field(default="gold", alias="fontColor")
    x_position: Optional[int] = Field(default=0, alias="xPosition")
    y_position: int = Field(default=0, alias="yPosition")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "fontFamily": "Lato",
                    "fontSize": 80,
                    "fontColor": "gold",
                    "xPosition": "center",
                    "yPosition": 540,
                }
            ]
        },
    }

    @field_validator("font_size", "y_position", mode="before")
    @classmethod
    def _parse_int(cls, value):
        return parse_position(value)

    @field_validator("x_position", mode="before")
    @classmethod
    def _parse_x(cls, value):
        if value is None:
            return None
        if isinstance(value, str) and value.strip().lower() == CENTER:
            return None
        return parse_position(value)

    @classmethod
    def from_form(cls, defaults: "CertificateOptions", **fields: Optional[str]) -> "CertificateOptions":
        """
        Build options from raw form values.

        Omitted or blank fields keep the value from ``defaults``, and so does
        a font size that is not a positive number.
        """
        values = defaults.model_dump()
        for name, value in fields.items():
            if value is None or str(value).strip() == "":
                continue
            if name == "font_size" and parse_position(value) <= 0:
                continue
            values[name] = value
        return cls.model_validate(values)

    def to_text_style(self) -> TextStyle:
        return TextStyle(
            font_family=self.font_family,
            font_size=self.font_size,
            color=self.font_color,
            x=self.x_position,
            y=self.y_position,
        )
