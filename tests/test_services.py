"""Tests for the final candidature commit."""

import uuid
from unittest.mock import patch

import pytest
from django.core.exceptions import ValidationError
from django.db import DatabaseError

from candidature import services
from candidature.exceptions import PersistenceError
from candidature.models import Candidate
from candidature.services import build_candidate, submit_application

DATA = {
    "first_name": "Test",
    "last_name": "User",
    "email": "test.user@example.com",
    "phone": None,
    "has_experience": False,
    "availability_date": None,
    "is_immediately_available": True,
    "consent_rgpd": True,
}


class TestBuildCandidate:
    def test_skipped_fields_stay_unset(self) -> None:
        candidate = build_candidate(DATA)
        assert candidate.experience_details is None
        assert candidate.status == Candidate.Status.DRAFT

    def test_unknown_keys_are_ignored(self) -> None:
        candidate = build_candidate(dict(DATA, submission_key="x"))
        assert candidate.submission_key is None

    def test_identifier_is_not_assigned_before_commit(self) -> None:
        assert build_candidate(DATA).pk is None


@pytest.mark.django_db
class TestSubmitApplication:
    def test_persists_submitted_candidate(self) -> None:
        candidate = submit_application(DATA, submission_key=uuid.uuid4())
        stored = Candidate.objects.get(pk=candidate.pk)
        assert stored.status == Candidate.Status.SUBMITTED
        assert stored.email == "test.user@example.com"

    def test_identifier_is_assigned_on_commit(self) -> None:
        candidate = submit_application(DATA, submission_key=uuid.uuid4())
        assert isinstance(candidate.pk, uuid.UUID)
        assert Candidate.objects.filter(pk=candidate.pk).exists()

    def test_same_key_returns_existing_candidate(self) -> None:
        key = uuid.uuid4()
        first = submit_application(DATA, submission_key=key)
        second = submit_application(DATA, submission_key=key)
        assert first.pk == second.pk
        assert Candidate.objects.count() == 1

    def test_concurrent_duplicate_returns_winning_candidate(self) -> None:
        key = uuid.uuid4()
        first = submit_application(DATA, submission_key=key)
        real_find = services.find_submitted
        calls = []

        def miss_first_lookup(submission_key):
            calls.append(submission_key)
            # The other request commits between our lookup and our insert
            if len(calls) == 1:
                return None
            return real_find(submission_key)

        with patch("candidature.services.find_submitted", side_effect=miss_first_lookup):
            second = submit_application(DATA, submission_key=key)

        assert len(calls) == 2
        assert second.pk == first.pk
        assert Candidate.objects.count() == 1

    def test_invalid_record_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            submit_application(dict(DATA, consent_rgpd=False), submission_key=uuid.uuid4())
        assert Candidate.objects.count() == 0

    def test_database_failure_raises_persistence_error(self) -> None:
        with patch.object(Candidate, "save", side_effect=DatabaseError("disk full")):
            with pytest.raises(PersistenceError):
                submit_application(DATA, submission_key=uuid.uuid4())
        assert Candidate.objects.count() == 0
