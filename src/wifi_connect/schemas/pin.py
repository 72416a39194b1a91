"""PIN pad schemas."""

from pydantic import BaseModel, Field


class PinVerifyRequest(BaseModel):
    """Code typed on the statistics PIN pad."""

    pin: str = Field(..., max_length=16)


class PinVerifyResponse(BaseModel):
    """Outcome of a PIN comparison."""

    success: bool = True
    valid: bool
