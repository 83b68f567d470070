"""Font catalog entry model."""

from pydantic import BaseModel, Field


class FontFamily(BaseModel):
    """One entry of the GET /fonts listing."""

    family: str = Field(..., min_length=1, description="Font family name")
    variants: list[str] = Field(
        default_factory=list,
        description="Available variants (e.g. 'regular', '700italic')",
    )

    model_config = {
        "json_schema_extra": {
            "example": {"family": "Lato", "variants": ["100", "regular", "700", "italic"]}
        }
    }
