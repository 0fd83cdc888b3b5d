"""
Forms of the candidature wizard.

One form per wizard step is generated from the step table in
``steps.py``: the step decides which ``Candidate`` fields are shown,
their labels and widgets.  Field-level checks come from the model
fields; the cross-field rules of ``validators.validate_candidate`` run
in ``clean`` once those checks pass.
"""

from __future__ import annotations

from typing import Dict, List, Tuple, Type

from django import forms
from django.forms.models import fields_for_model

from .models import Candidate
from .steps import FORM_STEPS, InputKind, Step
from .validators import (
    MSG_EMAIL_INVALID,
    MSG_EMAIL_REQUIRED,
    MSG_EXPERIENCE_REQUIRED,
    MSG_FIRST_NAME_REQUIRED,
    MSG_LAST_NAME_REQUIRED,
    validate_candidate,
)

INVALID_MESSAGES = {
    "email": MSG_EMAIL_INVALID,
}

REQUIRED_MESSAGES = {
    "first_name": MSG_FIRST_NAME_REQUIRED,
    "last_name": MSG_LAST_NAME_REQUIRED,
    "email": MSG_EMAIL_REQUIRED,
    "experience_details": MSG_EXPERIENCE_REQUIRED,
}


def _widget_for(kind: str) -> forms.Widget:
    if kind == InputKind.EMAIL:
        return forms.EmailInput()
    if kind == InputKind.TEXTAREA:
        return forms.Textarea(attrs={"rows": 5})
    if kind == InputKind.DATE:
        return forms.DateInput(attrs={"type": "date"}, format="%Y-%m-%d")
    if kind == InputKind.CHECKBOX:
        return forms.CheckboxInput()
    return forms.TextInput()


class CandidateStepForm(forms.Form):
    """Base form for one wizard step; ``step`` is set by the factory."""

    step: Step

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        for spec in self.step.fields:
            field = self.fields[spec.name]
            # An unchecked checkbox is a valid answer; consent is enforced in clean()
            if spec.kind != InputKind.CHECKBOX:
                field.required = spec.required
            if spec.name in REQUIRED_MESSAGES:
                field.error_messages["required"] = REQUIRED_MESSAGES[spec.name]
            if spec.name in INVALID_MESSAGES:
                field.error_messages["invalid"] = INVALID_MESSAGES[spec.name]

    def clean(self):
        cleaned_data = super().clean()
        if self.errors:
            return cleaned_data
        for field, message in validate_candidate(cleaned_data, fields=self.step.field_names):
            self.add_error(field, message)
        return cleaned_data


def step_form_factory(step: Step) -> Type[CandidateStepForm]:
    """Build the form class rendering ``step`` from the ``Candidate`` model fields."""
    attrs = fields_for_model(
        Candidate,
        fields=list(step.field_names),
        labels={spec.name: spec.label for spec in step.fields},
        widgets={spec.name: _widget_for(spec.kind) for spec in step.fields},
    )
    attrs["step"] = step
    return type(f"{step.name.title()}StepForm", (CandidateStepForm,), attrs)


STEP_FORMS: Dict[str, Type[CandidateStepForm]] = {
    step.name: step_form_factory(step) for step in FORM_STEPS
}


def wizard_form_list() -> List[Tuple[str, Type[CandidateStepForm]]]:
    """Form list in the shape expected by formtools' ``WizardView``."""
    return list(STEP_FORMS.items())
