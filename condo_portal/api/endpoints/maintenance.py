"""API endpoints for the building maintenance tracker.
"""
from typing import List
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from condo_portal.api.request_body import read_json_body
from condo_portal.core.exceptions import MethodNotAllowedError, PortalError, ValidationError
from condo_portal.models.maintenance import (
    MaintenanceCreatedResponse,
    MaintenanceErrorResponse,
    MaintenanceItem,
    MaintenanceOptionsResponse,
)
from condo_portal.services.maintenance_service import SCHEDULED_MESSAGE, maintenance_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

ALLOWED_METHODS = ["GET", "POST"]
FETCH_FAILED = "Failed to fetch maintenance items"
SCHEDULE_FAILED = "Failed to schedule maintenance request"


def error_response(error: PortalError, fallback: str = SCHEDULE_FAILED) -> JSONResponse:
    """Render a portal error in the maintenance endpoint's ``{"message": ...}`` shape."""
    message = error.message if error.status_code < 500 else fallback
    return JSONResponse(
        status_code=error.status_code,
        content=MaintenanceErrorResponse(message=message).model_dump(),
        headers=error.headers,
    )


@router.get(
    "",
    response_model=List[MaintenanceItem],
    status_code=status.HTTP_200_OK,
    summary="List upcoming maintenance",
    description="Get the upcoming maintenance items in the order they were scheduled.",
    responses={500: {"model": MaintenanceErrorResponse}},
)
async def list_upcoming_maintenance():
    try:
        return maintenance_service.list_upcoming()
    except Exception:
        logger.exception("Error fetching maintenance items")
        return error_response(PortalError(FETCH_FAILED), fallback=FETCH_FAILED)


@router.post(
    "",
    response_model=MaintenanceCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a maintenance request",
    description="Schedule a repair for the reported issue five days from now.",
    responses={
        400: {"model": MaintenanceErrorResponse, "description": "Issue subject missing or invalid"},
        500: {"model": MaintenanceErrorResponse, "description": "Unexpected error"},
    },
)
async def submit_maintenance_request(request: Request):
    """Schedule a repair for a resident-reported issue.

    Args:
        request: FastAPI request object carrying ``{"issueSubject": ...}``

    Returns:
        The scheduled item wrapped in a confirmation message, or an error body
    """
    try:
        payload = await read_json_body(request)
        maintenance_request = maintenance_service.validate_request(payload)
        item = maintenance_service.schedule_request(maintenance_request)
        return MaintenanceCreatedResponse(message=SCHEDULED_MESSAGE, item=item)

    except ValidationError as e:
        logger.warning(f"Rejected maintenance request: {e.message}")
        return error_response(e)

    except PortalError as e:
        return error_response(e)

    except Exception:
        logger.exception("Error processing maintenance request")
        return error_response(PortalError(SCHEDULE_FAILED))


@router.api_route(
    "",
    methods=["PUT", "PATCH", "DELETE", "OPTIONS", "HEAD", "TRACE", "CONNECT"],
    include_in_schema=False,
)
async def maintenance_method_not_allowed(request: Request) -> JSONResponse:
    return error_response(MethodNotAllowedError(request.method, ALLOWED_METHODS))


@router.get(
    "/recent",
    response_model=List[MaintenanceItem],
    status_code=status.HTTP_200_OK,
    summary="List recently completed maintenance",
)
async def list_recent_maintenance():
    return maintenance_service.list_recent()


@router.get(
    "/options",
    response_model=MaintenanceOptionsResponse,
    status_code=status.HTTP_200_OK,
    summary="List maintenance request form options",
    description="Get the issue types and locations a resident can pick from.",
)
async def get_maintenance_options():
    return maintenance_service.get_options()
