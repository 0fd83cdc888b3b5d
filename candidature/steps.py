"""
Step table of the candidature wizard.

Each wizard step is declared once here: its number, the name used by the
form wizard, a label shown to the candidate and the ordered list of
fields rendered on that step.  Forms, templates and the skip rule all
read this table instead of hard-coding step numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


class InputKind:
    """Kinds of inputs a step field is rendered with."""

    TEXT = "text"
    EMAIL = "email"
    TEXTAREA = "textarea"
    DATE = "date"
    CHECKBOX = "checkbox"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    kind: str
    required: bool = True


@dataclass(frozen=True)
class Step:
    number: int
    name: str
    label: str
    fields: Tuple[FieldSpec, ...] = ()

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(field.name for field in self.fields)

    @property
    def is_confirmation(self) -> bool:
        return not self.fields


PERSONAL = Step(
    number=1,
    name="personal",
    label="Informations personnelles",
    fields=(
        FieldSpec("first_name", "Prénom", InputKind.TEXT),
        FieldSpec("last_name", "Nom", InputKind.TEXT),
        FieldSpec("email", "Email", InputKind.EMAIL),
        FieldSpec("phone", "Téléphone", InputKind.TEXT, required=False),
        FieldSpec("has_experience", "Avez-vous de l'expérience ?", InputKind.CHECKBOX, required=False),
    ),
)

EXPERIENCE = Step(
    number=2,
    name="experience",
    label="Expérience",
    fields=(
        FieldSpec("experience_details", "Détails de l'expérience", InputKind.TEXTAREA),
    ),
)

AVAILABILITY = Step(
    number=3,
    name="availability",
    label="Disponibilité",
    fields=(
        FieldSpec("availability_date", "Date de disponibilité", InputKind.DATE, required=False),
        FieldSpec("is_immediately_available", "Disponible immédiatement", InputKind.CHECKBOX, required=False),
    ),
)

CONSENT = Step(
    number=4,
    name="consent",
    label="Consentement",
    fields=(
        FieldSpec("consent_rgpd", "J'accepte les conditions RGPD", InputKind.CHECKBOX),
    ),
)

CONFIRMATION = Step(number=5, name="confirmation", label="Confirmation")

STEPS: Tuple[Step, ...] = (PERSONAL, EXPERIENCE, AVAILABILITY, CONSENT, CONFIRMATION)

# Steps that collect data; the confirmation step is rendered by the success view.
FORM_STEPS: Tuple[Step, ...] = tuple(step for step in STEPS if not step.is_confirmation)

FIRST_STEP = STEPS[0].number
LAST_STEP = STEPS[-1].number


def get_step(number: int) -> Step:
    """Return the step with the given number.

    Raises ``ValueError`` for numbers outside the table.
    """
    if not FIRST_STEP <= number <= LAST_STEP:
        raise ValueError(f"Unknown wizard step: {number}")
    return STEPS[number - FIRST_STEP]


def get_step_by_name(name: str) -> Step:
    for step in STEPS:
        if step.name == name:
            return step
    raise ValueError(f"Unknown wizard step: {name!r}")


def fields_for_step(number: int) -> Tuple[FieldSpec, ...]:
    """Ordered fields rendered on step ``number`` (empty for the confirmation)."""
    return get_step(number).fields
