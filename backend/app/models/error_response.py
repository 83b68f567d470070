"""
Error response model.

Shape of the JSON body returned for client-facing errors.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response for rejected requests."""

    error: str = Field(..., description="Human-readable error message")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"error": "Please upload both the template and participants files."},
                {"error": "The participants list is empty."},
                {"error": "Failed to fetch fonts."},
            ]
        }
    }
