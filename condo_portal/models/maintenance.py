"""Data models for the maintenance tracker API.

This module contains Pydantic models that define the structure of request and
response data for the maintenance endpoints.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class MaintenanceType(str, Enum):
    """Maintenance item categories displayed on the tracker."""
    REGULAR = "Regular"
    INSPECTION = "Inspection"
    REPAIR = "Repair"
    EMERGENCY = "Emergency"


class MaintenanceStatus(str, Enum):
    """Lifecycle states of a maintenance item. Stored lowercase."""
    SCHEDULED = "scheduled"
    PENDING_PARTS = "pending parts"
    COMPLETED = "completed"
    RESOLVED = "resolved"


class MaintenanceItem(BaseModel):
    """A scheduled or completed maintenance task.

    Attributes:
        type: Maintenance category (e.g., Regular, Inspection, Repair, Emergency)
        task: Short title of the work to be done
        date: Human-readable date, e.g. "April 15, 2025"
        status: Current status, e.g. scheduled or pending parts
    """
    type: str = Field(..., description="Maintenance category (e.g., Regular, Inspection, Repair, Emergency)")
    task: str = Field(..., description="Short title of the work to be done")
    date: str = Field(..., description="Human-readable date, e.g. 'April 15, 2025'")
    status: str = Field(..., description="Current status, e.g. scheduled or pending parts")

    model_config = ConfigDict(frozen=True)


class MaintenanceRequest(BaseModel):
    """Request model for a resident-reported maintenance issue.

    Only the subject becomes part of the scheduled item; the remaining fields
    are accepted for the request log.
    """
    issue_subject: Optional[str] = Field(None, alias="issueSubject", description="Short title of the issue")
    issue_type: Optional[str] = Field(None, alias="issueType", description="Issue type key, e.g. plumbing")
    issue_location: Optional[str] = Field(None, alias="issueLocation", description="Location key, e.g. lobby")
    issue_description: Optional[str] = Field(None, alias="issueDescription", description="Free-form details")

    model_config = ConfigDict(populate_by_name=True)


class MaintenanceCreatedResponse(BaseModel):
    """Response model returned once a maintenance request is scheduled."""
    message: str
    item: MaintenanceItem


class MaintenanceErrorResponse(BaseModel):
    """Error body returned when a maintenance request fails."""
    message: str


class IssueOption(BaseModel):
    """A selectable value on the maintenance request form."""
    value: str
    label: str

    model_config = ConfigDict(frozen=True)


class MaintenanceOptionsResponse(BaseModel):
    """Issue types and locations offered by the maintenance request form."""
    issue_types: List[IssueOption] = Field(..., alias="issueTypes")
    issue_locations: List[IssueOption] = Field(..., alias="issueLocations")

    model_config = ConfigDict(populate_by_name=True)
