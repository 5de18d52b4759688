from typing import Optional

from pydantic import BaseModel, Field


class CalculationRequest(BaseModel):
    """Calculation request payload."""

    expression: str = Field(..., description="Expression text, operator glyphs allowed")


class CalculationResponse(BaseModel):
    """Successful calculation response."""

    value: float = Field(..., description="Computed value")
    display: str = Field(..., description="Value formatted for display")


class CalculationErrorDetail(BaseModel):
    """Error detail returned for rejected expressions."""

    error: str = Field(..., description="Error kind, e.g. 'division_by_zero'")
    message: str = Field(..., description="Human-readable error message")
    position: Optional[int] = Field(
        None, description="Offending position in the normalized expression"
    )
