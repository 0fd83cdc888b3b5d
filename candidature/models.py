import uuid
from typing import Any, Dict

from django.core.exceptions import ValidationError
from django.db import models

from .exceptions import InvalidStatusTransition
from .validators import validate_candidate

# Fields collected by the wizard, in the order they are asked for.
CANDIDATE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "has_experience",
    "experience_details",
    "availability_date",
    "is_immediately_available",
    "consent_rgpd",
)


class Candidate(models.Model):
    """A job application submitted through the candidature wizard.

    Records are only written once the last wizard step is passed, so in
    practice every stored candidate is ``submitted``; ``draft`` is the
    state of the in-memory instance while the wizard assembles it.  The
    primary key is an opaque UUID so confirmation URLs cannot be guessed.
    """

    class Status(models.TextChoices):
        DRAFT = "draft", "Brouillon"
        SUBMITTED = "submitted", "Soumise"

    id = models.UUIDField(primary_key=True, editable=False)
    first_name = models.CharField("prénom", max_length=255)
    last_name = models.CharField("nom", max_length=255)
    email = models.EmailField("email", max_length=255)
    phone = models.CharField("téléphone", max_length=255, blank=True, null=True)
    has_experience = models.BooleanField("expérience", default=False)
    experience_details = models.TextField("détails de l'expérience", blank=True, null=True)
    availability_date = models.DateField("date de disponibilité", blank=True, null=True)
    is_immediately_available = models.BooleanField("disponible immédiatement", default=False)
    consent_rgpd = models.BooleanField("consentement RGPD", default=False)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.DRAFT)
    # Idempotency token of the wizard session that produced this record
    submission_key = models.UUIDField(unique=True, blank=True, null=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} <{self.email}>"

    def as_data(self) -> Dict[str, Any]:
        """Return the wizard-collected fields as a plain dict."""
        return {name: getattr(self, name) for name in CANDIDATE_FIELDS}

    def submit(self) -> None:
        """Move the candidature from draft to submitted."""
        if self.status != self.Status.DRAFT:
            raise InvalidStatusTransition(
                f"Cannot submit a candidature in status {self.status!r}"
            )
        self.status = self.Status.SUBMITTED

    def clean(self) -> None:
        errors: Dict[str, list] = {}
        for field, message in validate_candidate(self.as_data()):
            errors.setdefault(field, []).append(message)
        if errors:
            raise ValidationError(errors)

    def save(self, *args, **kwargs) -> None:
        if self._state.adding and self.pk is None:
            # The identifier is only assigned when the record is first stored
            self.pk = uuid.uuid4()
        elif not self._state.adding:
            stored_status = (
                Candidate.objects.filter(pk=self.pk).values_list("status", flat=True).first()
            )
            if stored_status == self.Status.SUBMITTED and self.status != self.Status.SUBMITTED:
                raise InvalidStatusTransition("A submitted candidature cannot go back to draft")
        super().save(*args, **kwargs)
