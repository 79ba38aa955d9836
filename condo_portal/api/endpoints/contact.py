"""Contact form endpoints for the condo resident portal API.

This module contains FastAPI routes for the resident inquiry form.
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from condo_portal.api.request_body import read_json_body
from condo_portal.core.exceptions import MethodNotAllowedError, PortalError, ValidationError
from condo_portal.models.contact import (
    CategoriesResponse,
    ContactErrorResponse,
    ContactFormResponse,
)
from condo_portal.services.contact_service import contact_service

logger = logging.getLogger(__name__)

router = APIRouter()

ALLOWED_METHODS = ["GET", "POST"]
GENERIC_ERROR = "Internal server error"


def error_response(error: PortalError) -> JSONResponse:
    """Render a portal error in the contact endpoint's ``{"error": ...}`` shape."""
    if isinstance(error, ValidationError):
        body = ContactErrorResponse(error=error.message, fields=error.errors)
    elif isinstance(error, MethodNotAllowedError):
        body = ContactErrorResponse(error="Method Not Allowed")
    else:
        body = ContactErrorResponse(error=GENERIC_ERROR)

    return JSONResponse(
        status_code=error.status_code,
        content=body.model_dump(),
        headers=error.headers,
    )


@router.get(
    "",
    response_model=CategoriesResponse,
    status_code=status.HTTP_200_OK,
    summary="List inquiry categories",
    description="Get the fixed, ordered list of categories offered by the contact form.",
)
async def get_categories() -> CategoriesResponse:
    return CategoriesResponse(categories=contact_service.get_categories())


@router.post(
    "",
    response_model=ContactFormResponse,
    status_code=status.HTTP_200_OK,
    summary="Submit contact form",
    description="Submit a resident inquiry. The submission is validated and logged, never stored.",
    responses={
        400: {"model": ContactErrorResponse, "description": "A form field failed validation"},
        500: {"model": ContactErrorResponse, "description": "Unexpected error"},
    },
)
async def submit_contact_form(request: Request):
    """
    Submit a contact form message to the management office.

    This endpoint:
    - Validates every form field and reports each failing field
    - Logs the submission under a generated reference ID
    - Does not persist or forward the submission

    Args:
        request: FastAPI request object carrying the JSON form body

    Returns:
        Acknowledgment with a success flag, or an error body describing the failure
    """
    try:
        payload = await read_json_body(request)
        submission = contact_service.validate_submission(payload)
        return contact_service.submit(submission)

    except ValidationError as e:
        logger.warning(f"Rejected contact form submission: {e.message}")
        return error_response(e)

    except PortalError as e:
        return error_response(e)

    except Exception:
        logger.exception("Unexpected error processing contact form")
        return error_response(PortalError(GENERIC_ERROR))


@router.api_route(
    "",
    methods=["PUT", "PATCH", "DELETE", "OPTIONS", "HEAD", "TRACE", "CONNECT"],
    include_in_schema=False,
)
async def contact_method_not_allowed(request: Request) -> JSONResponse:
    return error_response(MethodNotAllowedError(request.method, ALLOWED_METHODS))
