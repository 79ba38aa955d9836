"""Contact form models for the condo resident portal API.

This module contains the Pydantic models for the resident inquiry form.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictBool, field_validator

from condo_portal.models.errors import FieldError
from condo_portal.utils.constants import INQUIRY_CATEGORY_VALUES


class InquiryCategory(BaseModel):
    """A selectable inquiry category.

    Attributes:
        value: Unique key submitted with the form
        label: Display text shown to residents
    """
    value: str = Field(..., description="Unique key submitted with the form")
    label: str = Field(..., description="Display text shown to residents")

    model_config = ConfigDict(frozen=True)


class CategoriesResponse(BaseModel):
    """Response model listing the inquiry categories."""
    categories: List[InquiryCategory]


class ContactSubmission(BaseModel):
    """Request model for contact form submissions.

    Attributes:
        name: Full name of the resident
        email: Email address for the reply
        unit_number: Resident's unit number
        category: Inquiry category key, one of the known categories
        message: The inquiry itself
        copy_to_email: Whether the resident asked for a copy of the message
    """
    name: str = Field(..., min_length=2, description="Full name of the resident")
    email: EmailStr = Field(..., description="Email address for the reply")
    unit_number: str = Field(..., alias="unitNumber", min_length=1, description="Resident's unit number")
    category: str = Field(..., min_length=1, description="Inquiry category key")
    message: str = Field(..., min_length=10, description="The inquiry itself")
    copy_to_email: StrictBool = Field(False, alias="copyToEmail", description="Send a copy to the resident")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("unit_number")
    def validate_unit_number(cls, value: str) -> str:
        """Validate that the unit number is not just whitespace."""
        if not value.strip():
            raise ValueError("Unit number is required")
        return value

    @field_validator("category")
    def validate_category(cls, value: str) -> str:
        """Validate that the category is one of the known inquiry categories."""
        if value not in INQUIRY_CATEGORY_VALUES:
            raise ValueError(f"Unknown inquiry category: {value}")
        return value


class ContactFormResponse(BaseModel):
    """Response model for contact form submissions.

    Attributes:
        success: Whether the contact form was submitted successfully
        message: Success message for the resident
        reference_id: Reference ID used to correlate the submission in logs
    """
    success: bool = Field(..., description="Whether the contact form was submitted successfully")
    message: str = Field(..., description="Success message for the resident")
    reference_id: Optional[str] = Field(None, alias="referenceId", description="Reference ID for the submission")

    model_config = ConfigDict(populate_by_name=True)


class ContactErrorResponse(BaseModel):
    """Error body returned when a contact request fails."""
    error: str
    fields: List[FieldError] = Field(default_factory=list)
