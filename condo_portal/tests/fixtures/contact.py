import pytest
from condo_portal.models.contact import ContactSubmission
from condo_portal.tests.constants.contact import ContactTestConstants


@pytest.fixture(scope="function")
def mock_contact_submission():
    """Fixture providing a valid ContactSubmission model instance."""
    return ContactSubmission(**ContactTestConstants.VALID_SUBMISSION.value)


@pytest.fixture(scope="function")
def mock_contact_service_submit(mocker):
    """Fixture to patch and provide a mock for contact_service.submit."""
    mock = mocker.patch("condo_portal.api.endpoints.contact.contact_service.submit")
    return mock
