"""Field-level error model shared by request validators."""

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """A single failed field constraint.

    Attributes:
        field: Name of the request field, as sent by the client
        message: Human-readable description of the violation
    """
    field: str = Field(..., description="Name of the request field, as sent by the client")
    message: str = Field(..., description="Human-readable description of the violation")
