import pytest
from condo_portal.services.maintenance_service import MaintenanceService
from condo_portal.tests.constants.maintenance import MOCK_NOW


@pytest.fixture(scope="function")
def fresh_maintenance_service():
    """Fixture providing a freshly seeded MaintenanceService with a fixed clock."""
    return MaintenanceService(clock=lambda: MOCK_NOW)


@pytest.fixture(scope="function")
def mock_maintenance_service(mocker, fresh_maintenance_service):
    """Fixture to swap the endpoint's maintenance_service for a fresh one."""
    mocker.patch(
        "condo_portal.api.endpoints.maintenance.maintenance_service",
        fresh_maintenance_service,
    )
    return fresh_maintenance_service
