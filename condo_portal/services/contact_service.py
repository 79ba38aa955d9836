"""
ContactService Module

This module validates resident inquiries submitted through the contact form.
Submissions are logged for the management office and then discarded.
"""

import logging
import uuid
from typing import Any, List

from pydantic import ValidationError as PydanticValidationError

from condo_portal.core.exceptions import ValidationError
from condo_portal.models.contact import (
    ContactFormResponse,
    ContactSubmission,
    InquiryCategory,
)
from condo_portal.utils.constants import INQUIRY_CATEGORIES
from condo_portal.utils.helper_functions import collect_field_errors

logger = logging.getLogger(__name__)

CONTACT_FIELD_MESSAGES = {
    "name": "Name must be at least 2 characters.",
    "email": "Please enter a valid email address.",
    "unitNumber": "Please enter your unit number.",
    "category": "Please select a category.",
    "message": "Message must be at least 10 characters.",
    "copyToEmail": "Copy to email must be true or false.",
}

SUCCESS_MESSAGE = "Message sent successfully!"


class ContactService:
    """Service for the resident contact form."""

    def __init__(self):
        self._categories = tuple(InquiryCategory(**category) for category in INQUIRY_CATEGORIES)

    def get_categories(self) -> List[InquiryCategory]:
        """Return the fixed inquiry categories in display order."""
        return list(self._categories)

    def validate_submission(self, payload: Any) -> ContactSubmission:
        """Validate a raw JSON body against the contact form schema.

        Args:
            payload: Decoded JSON request body

        Returns:
            The validated submission

        Raises:
            ValidationError: If the body is not an object or any field fails
                its constraint. The error lists every failing field.
        """
        if not isinstance(payload, dict):
            raise ValidationError("Invalid form submission: request body must be a JSON object")

        try:
            return ContactSubmission.model_validate(payload)
        except PydanticValidationError as e:
            errors = collect_field_errors(e, CONTACT_FIELD_MESSAGES)
            failed = ", ".join(error.field for error in errors)
            raise ValidationError(f"Invalid form submission: {failed}", errors)

    def submit(self, submission: ContactSubmission) -> ContactFormResponse:
        """Record a validated submission in the log and acknowledge it.

        Args:
            submission: Validated contact form data

        Returns:
            Acknowledgment carrying a reference ID for log correlation
        """
        reference_id = f"REF-{uuid.uuid4().hex[:8].upper()}"
        logger.info(
            f"New contact form submission - Reference: {reference_id} "
            f"[unit:{submission.unit_number}][category:{submission.category}]"
            f"[copy_to_email:{submission.copy_to_email}]"
        )
        logger.debug(f"Contact submission {reference_id}: {submission.model_dump(by_alias=True)}")

        return ContactFormResponse(
            success=True,
            message=SUCCESS_MESSAGE,
            reference_id=reference_id,
        )


contact_service = ContactService()
