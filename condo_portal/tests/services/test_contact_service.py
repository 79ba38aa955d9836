import logging
import pytest
from condo_portal.core.exceptions import ValidationError
from condo_portal.services.contact_service import ContactService, contact_service
from condo_portal.tests.constants.contact import ContactTestConstants


class TestContactValidation:

    def test_validate_submission_success(self):
        submission = contact_service.validate_submission(
            ContactTestConstants.VALID_SUBMISSION.value
        )

        assert submission.name == "Jane Doe"
        assert submission.email == "jane.doe@condomail.com"
        assert submission.unit_number == "12B"
        assert submission.copy_to_email is True

    def test_copy_to_email_defaults_to_false(self):
        payload = ContactTestConstants.VALID_SUBMISSION.value.copy()
        del payload["copyToEmail"]

        assert contact_service.validate_submission(payload).copy_to_email is False

    def test_text_is_kept_as_typed(self):
        payload = dict(
            ContactTestConstants.VALID_SUBMISSION.value,
            name=" J",
            message="Hi there  ",
        )

        submission = contact_service.validate_submission(payload)

        assert submission.name == " J"
        assert submission.message == "Hi there  "

    def test_blank_unit_number_rejected(self):
        payload = dict(ContactTestConstants.VALID_SUBMISSION.value, unitNumber=" \t ")

        with pytest.raises(ValidationError) as exc_info:
            contact_service.validate_submission(payload)

        assert exc_info.value.fields == ["unitNumber"]

    def test_unknown_fields_are_ignored(self):
        payload = dict(ContactTestConstants.VALID_SUBMISSION.value, phone="555-0100")

        submission = contact_service.validate_submission(payload)

        assert not hasattr(submission, "phone")

    def test_multiple_failures_are_all_reported(self):
        payload = dict(
            ContactTestConstants.VALID_SUBMISSION.value,
            name="J",
            email="not-an-email",
        )

        with pytest.raises(ValidationError) as exc_info:
            contact_service.validate_submission(payload)

        assert exc_info.value.fields == ["name", "email"]
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid form submission: name, email"

    @pytest.mark.parametrize("payload", [None, "Jane", 12, ["Jane"]])
    def test_non_object_payload(self, payload):
        with pytest.raises(ValidationError):
            contact_service.validate_submission(payload)


class TestContactSubmission:

    def test_submit_acknowledges_and_logs(self, mock_contact_submission, caplog):
        with caplog.at_level(logging.INFO, logger="condo_portal.services.contact_service"):
            response = ContactService().submit(mock_contact_submission)

        assert response.success is True
        assert response.reference_id.startswith("REF-")
        assert len(response.reference_id) == len("REF-") + 8
        assert response.reference_id in caplog.text

    def test_reference_ids_are_unique(self, mock_contact_submission):
        first = contact_service.submit(mock_contact_submission)
        second = contact_service.submit(mock_contact_submission)

        assert first.reference_id != second.reference_id

    def test_get_categories_is_a_copy(self):
        categories = contact_service.get_categories()
        categories.pop()

        assert len(contact_service.get_categories()) == 6
