# Purpose: Defines the data contracts (schemas) for the API.
# The dataset itself is opaque: only the top-level shape is recognized,
# everything below it is passed through untouched.

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

# =======================================================================
#  Dataset Schema
# =======================================================================

class ConversionData(BaseModel):
    """
    The conversions.json document, produced by the rate-update scripts
    and served as-is to the frontend.

    All recognized fields are optional. Fields missing from the file stay
    missing in the response (serialize with exclude_unset=True), and unknown
    top-level keys are kept.
    """

    lastUpdated: Optional[str] = Field(
        default=None,
        description="ISO timestamp of when the dataset was last refreshed."
    )
    dataSource: Optional[str] = Field(
        default=None,
        description="Where the rates came from."
    )
    config: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Global configuration block for the converter."
    )
    programs: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Loyalty programs keyed by program id."
    )
    conversions: Optional[List[Any]] = Field(
        default=None,
        description="Transfer-rate records between programs."
    )

    class Config:
        extra = "allow"
        frozen = True
        json_schema_extra = {
            "example": {
                "lastUpdated": "2025-01-01T00:00:00Z",
                "dataSource": "manual",
                "config": {"defaultDollarValue": 0.01},
                "programs": {
                    "chase-ur": {"name": "Chase Ultimate Rewards", "type": "bank"}
                },
                "conversions": [
                    {"from": "chase-ur", "to": "united", "rate": 1.0, "bonus": False}
                ]
            }
        }

    @property
    def program_count(self) -> int:
        return len(self.programs or {})

    @property
    def conversion_count(self) -> int:
        return len(self.conversions or [])

    def to_response(self) -> Dict[str, Any]:
        """Plain-JSON view of the document as it was loaded."""
        return self.model_dump(exclude_unset=True)


# =======================================================================
#  Response Schemas
# =======================================================================

class HealthStatus(BaseModel):
    """Liveness body for /health. Says nothing about the dataset."""

    status: str = Field(default="healthy")
    message: str = Field(default="Points Converter API is running")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "message": "Points Converter API is running"
            }
        }


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human-readable failure reason.")
