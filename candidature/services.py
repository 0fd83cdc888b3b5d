"""
Final commit of a candidature.

The wizard calls ``submit_application`` once every step has been
validated.  The candidate is built from the accumulated step data,
moved to ``submitted`` and stored in a single transaction.  A wizard
session carries a ``submission_key``; submitting the same key twice
returns the candidate created the first time instead of a duplicate.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Mapping, Optional

from django.db import DatabaseError, IntegrityError, transaction

from .exceptions import PersistenceError
from .models import CANDIDATE_FIELDS, Candidate

logger = logging.getLogger(__name__)


def build_candidate(data: Mapping[str, Any]) -> Candidate:
    """Return an unsaved draft ``Candidate`` from wizard data.

    Fields of skipped steps are left unset.
    """
    return Candidate(**{name: data[name] for name in CANDIDATE_FIELDS if name in data})


def find_submitted(submission_key: Optional[uuid.UUID]) -> Optional[Candidate]:
    if submission_key is None:
        return None
    return Candidate.objects.filter(submission_key=submission_key).first()


def submit_application(
    data: Mapping[str, Any], submission_key: Optional[uuid.UUID] = None
) -> Candidate:
    """Validate, submit and persist a candidature.

    Raises ``django.core.exceptions.ValidationError`` when the assembled
    record breaks a rule, and ``PersistenceError`` when it cannot be
    stored.
    """
    existing = find_submitted(submission_key)
    if existing is not None:
        logger.info("Candidature %s already submitted for key %s", existing.pk, submission_key)
        return existing

    candidate = build_candidate(data)
    candidate.submission_key = submission_key
    candidate.full_clean(exclude=["id", "submission_key"])
    candidate.submit()
    try:
        with transaction.atomic():
            candidate.save(force_insert=True)
    except IntegrityError as exc:
        # A concurrent request with the same key won the race
        existing = find_submitted(submission_key)
        if existing is not None:
            return existing
        raise PersistenceError("Could not store the candidature") from exc
    except DatabaseError as exc:
        raise PersistenceError("Could not store the candidature") from exc
    logger.info("Candidature %s submitted", candidate.pk)
    return candidate
