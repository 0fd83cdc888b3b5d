"""Unit tests for the cross-field candidature rules."""

import datetime

from candidature.validators import (
    MSG_AVAILABILITY_REQUIRED,
    MSG_CONSENT_REQUIRED,
    MSG_EXPERIENCE_REQUIRED,
    MSG_FIRST_NAME_REQUIRED,
    validate_candidate,
)

VALID = {
    "first_name": "Test",
    "last_name": "User",
    "email": "test.user@example.com",
    "phone": None,
    "has_experience": True,
    "experience_details": "2 years as a developer.",
    "availability_date": None,
    "is_immediately_available": True,
    "consent_rgpd": True,
}


class TestValidateCandidate:
    def test_complete_record_is_valid(self) -> None:
        assert validate_candidate(VALID) == []

    def test_blank_first_name(self) -> None:
        data = dict(VALID, first_name="   ")
        assert ("first_name", MSG_FIRST_NAME_REQUIRED) in validate_candidate(data)

    def test_invalid_email(self) -> None:
        data = dict(VALID, email="not-an-email")
        ((field, message),) = validate_candidate(data)
        assert field == "email"
        assert "not-an-email" in message

    def test_experience_details_required_with_experience(self) -> None:
        data = dict(VALID, experience_details="")
        assert validate_candidate(data) == [("experience_details", MSG_EXPERIENCE_REQUIRED)]

    def test_experience_details_optional_without_experience(self) -> None:
        data = dict(VALID, has_experience=False, experience_details=None)
        assert validate_candidate(data) == []

    def test_availability_date_required_when_not_immediate(self) -> None:
        data = dict(VALID, is_immediately_available=False, availability_date=None)
        assert validate_candidate(data) == [("availability_date", MSG_AVAILABILITY_REQUIRED)]

    def test_availability_date_satisfies_rule(self) -> None:
        data = dict(
            VALID,
            is_immediately_available=False,
            availability_date=datetime.date(2026, 11, 2),
        )
        assert validate_candidate(data) == []

    def test_consent_must_be_true(self) -> None:
        data = dict(VALID, consent_rgpd=False)
        assert validate_candidate(data) == [("consent_rgpd", MSG_CONSENT_REQUIRED)]


class TestPartialData:
    """Rules wait until the fields they depend on are known."""

    def test_experience_rule_waits_for_details(self) -> None:
        assert validate_candidate({"has_experience": True}) == []

    def test_availability_rule_waits_for_both_fields(self) -> None:
        assert validate_candidate({"is_immediately_available": False}) == []

    def test_fields_filter(self) -> None:
        data = {"first_name": "", "consent_rgpd": False}
        assert validate_candidate(data, fields=("consent_rgpd",)) == [
            ("consent_rgpd", MSG_CONSENT_REQUIRED)
        ]
