"""
MaintenanceService Module

This module owns the in-memory maintenance tracker. Upcoming items live in a
process-local store that is seeded at startup, grows only by appending and is
reset whenever the process restarts.
"""

import logging
import threading
from datetime import datetime, timedelta
from typing import Any, Callable, Iterable, List, Optional

from pydantic import ValidationError as PydanticValidationError

from condo_portal.core.config import settings
from condo_portal.core.exceptions import MissingFieldError, ValidationError
from condo_portal.models.errors import FieldError
from condo_portal.models.maintenance import (
    IssueOption,
    MaintenanceItem,
    MaintenanceOptionsResponse,
    MaintenanceRequest,
    MaintenanceStatus,
    MaintenanceType,
)
from condo_portal.utils.constants import (
    ISSUE_LOCATIONS,
    ISSUE_TYPES,
    RECENT_MAINTENANCE,
    SEED_UPCOMING_MAINTENANCE,
)
from condo_portal.utils.helper_functions import collect_field_errors, format_display_date, is_blank

logger = logging.getLogger(__name__)

ISSUE_SUBJECT_FIELD = "issueSubject"
ISSUE_SUBJECT_REQUIRED = "Issue subject is required"
SCHEDULED_MESSAGE = "Maintenance request successfully scheduled"


class MaintenanceStore:
    """Process-local list of upcoming maintenance items.

    The list is only reachable through ``list`` and ``append``. Both take the
    same lock, so callers on any thread see whole appends.
    """

    def __init__(self, seed: Optional[Iterable[MaintenanceItem]] = None):
        self._seed = tuple(seed or ())
        self._items: List[MaintenanceItem] = list(self._seed)
        self._lock = threading.Lock()

    def list(self) -> List[MaintenanceItem]:
        """Return a snapshot of the items in insertion order."""
        with self._lock:
            return list(self._items)

    def append(self, item: MaintenanceItem) -> MaintenanceItem:
        with self._lock:
            self._items.append(item)
        return item

    def reset(self) -> None:
        """Restore the seed items, dropping everything appended since."""
        with self._lock:
            self._items = list(self._seed)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


def seed_items() -> List[MaintenanceItem]:
    return [MaintenanceItem(**item) for item in SEED_UPCOMING_MAINTENANCE]


class MaintenanceService:
    """Service for listing and scheduling building maintenance."""

    def __init__(
        self,
        store: Optional[MaintenanceStore] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the service.

        Args:
            store: Store holding upcoming items; a freshly seeded one by default
            clock: Returns the current time, used to compute scheduled dates
        """
        self.store = store if store is not None else MaintenanceStore(seed_items())
        self.clock = clock
        self._recent = tuple(MaintenanceItem(**item) for item in RECENT_MAINTENANCE)

    def list_upcoming(self) -> List[MaintenanceItem]:
        return self.store.list()

    def list_recent(self) -> List[MaintenanceItem]:
        """Return recently completed maintenance. This list never changes."""
        return list(self._recent)

    def get_options(self) -> MaintenanceOptionsResponse:
        return MaintenanceOptionsResponse(
            issue_types=[IssueOption(**option) for option in ISSUE_TYPES],
            issue_locations=[IssueOption(**option) for option in ISSUE_LOCATIONS],
        )

    def validate_request(self, payload: Any) -> MaintenanceRequest:
        """Validate a raw JSON body for a new maintenance request.

        Args:
            payload: Decoded JSON request body

        Returns:
            The validated request

        Raises:
            MissingFieldError: If issueSubject is absent, null or blank
            ValidationError: If the body is not an object, a field has the
                wrong type, or the subject is too long
        """
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")

        if is_blank(payload.get(ISSUE_SUBJECT_FIELD)):
            raise MissingFieldError(ISSUE_SUBJECT_FIELD, ISSUE_SUBJECT_REQUIRED)

        try:
            request = MaintenanceRequest.model_validate(payload)
        except PydanticValidationError as e:
            errors = collect_field_errors(e, {})
            failed = ", ".join(f"{error.field}: {error.message}" for error in errors)
            raise ValidationError(f"Invalid maintenance request ({failed})", errors)

        max_length = settings.MAX_ISSUE_SUBJECT_LENGTH
        if len(request.issue_subject) > max_length:
            message = f"Issue subject must be at most {max_length} characters"
            raise ValidationError(message, [FieldError(field=ISSUE_SUBJECT_FIELD, message=message)])

        return request

    def scheduled_date(self) -> str:
        """Date a request made now is scheduled for, in display format."""
        return format_display_date(self.clock() + timedelta(days=settings.MAINTENANCE_LEAD_DAYS))

    def schedule_request(self, request: MaintenanceRequest) -> MaintenanceItem:
        """Create a repair item for the request and append it to the tracker.

        Args:
            request: Validated maintenance request

        Returns:
            The newly scheduled item
        """
        item = MaintenanceItem(
            type=MaintenanceType.REPAIR.value,
            task=request.issue_subject,
            date=self.scheduled_date(),
            status=MaintenanceStatus.SCHEDULED.value,
        )
        logger.info(
            f"Scheduling maintenance:[task:{item.task}][date:{item.date}]"
            f"[issue_type:{request.issue_type}][issue_location:{request.issue_location}]"
        )
        # Appending is the last step so a failure above leaves the list untouched
        return self.store.append(item)


maintenance_service = MaintenanceService()
