"""
Cross-field validation rules for a candidature.

``validate_candidate`` takes whatever candidate data is known so far and
returns every violated rule as a ``(field, message)`` pair.  A rule is
only evaluated once all the fields it depends on are present, so the
same function serves a single wizard step and the complete record.
"""

from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, Tuple

from django.core.exceptions import ValidationError
from django.core.validators import validate_email

Violation = Tuple[str, str]

MSG_FIRST_NAME_REQUIRED = "Le prénom est obligatoire."
MSG_LAST_NAME_REQUIRED = "Le nom est obligatoire."
MSG_EMAIL_REQUIRED = "L'email est obligatoire."
MSG_EMAIL_INVALID = "L'adresse email \"%(value)s\" n'est pas valide."
MSG_EXPERIENCE_REQUIRED = "Veuillez détailler votre expérience professionnelle."
MSG_AVAILABILITY_REQUIRED = "Veuillez indiquer une date de disponibilité."
MSG_CONSENT_REQUIRED = "Vous devez accepter le consentement RGPD pour soumettre votre candidature."

REQUIRED_STRINGS = (
    ("first_name", MSG_FIRST_NAME_REQUIRED),
    ("last_name", MSG_LAST_NAME_REQUIRED),
    ("email", MSG_EMAIL_REQUIRED),
)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _check_required_strings(data: Mapping[str, Any]) -> List[Violation]:
    return [
        (field, message)
        for field, message in REQUIRED_STRINGS
        if field in data and _is_blank(data[field])
    ]


def _check_email(data: Mapping[str, Any]) -> List[Violation]:
    email = data.get("email")
    if _is_blank(email):
        return []
    try:
        validate_email(email)
    except ValidationError:
        return [("email", MSG_EMAIL_INVALID % {"value": email})]
    return []


def _check_experience(data: Mapping[str, Any]) -> List[Violation]:
    if "has_experience" not in data or "experience_details" not in data:
        return []
    if data["has_experience"] and _is_blank(data["experience_details"]):
        return [("experience_details", MSG_EXPERIENCE_REQUIRED)]
    return []


def _check_availability(data: Mapping[str, Any]) -> List[Violation]:
    if "is_immediately_available" not in data or "availability_date" not in data:
        return []
    if not data["is_immediately_available"] and data["availability_date"] is None:
        return [("availability_date", MSG_AVAILABILITY_REQUIRED)]
    return []


def _check_consent(data: Mapping[str, Any]) -> List[Violation]:
    if "consent_rgpd" in data and data["consent_rgpd"] is not True:
        return [("consent_rgpd", MSG_CONSENT_REQUIRED)]
    return []


RULES: Tuple[Callable[[Mapping[str, Any]], List[Violation]], ...] = (
    _check_required_strings,
    _check_email,
    _check_experience,
    _check_availability,
    _check_consent,
)


def validate_candidate(
    data: Mapping[str, Any], fields: Optional[Tuple[str, ...]] = None
) -> List[Violation]:
    """Return the rule violations found in ``data``.

    When ``fields`` is given, only violations reported on those fields are
    returned (used to validate a single wizard step).
    """
    violations: List[Violation] = []
    for rule in RULES:
        violations.extend(rule(data))
    if fields is not None:
        violations = [violation for violation in violations if violation[0] in fields]
    return violations
