"""
Views of the candidature wizard.

``CandidateApplicationWizard`` is a formtools ``SessionWizardView`` that
walks the candidate through the steps declared in ``steps.py``.  The
partial candidature lives in the session under the ``candidature``
prefix until the last step is passed; only then is a ``Candidate``
stored (see ``services.submit_application``).

Compared to a stock wizard, this one:

- resumes the current step on GET instead of starting over,
- answers a valid step with a redirect to ``/apply/`` (post/redirect/get),
- delegates the choice of the next step to ``flow.next_step``,
- keeps the session state when the final commit fails.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Optional

from django.contrib import messages
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST
from django.views.generic import DetailView
from formtools.wizard.storage import get_storage
from formtools.wizard.views import SessionWizardView

from .exceptions import PersistenceError
from .flow import next_step, should_skip
from .forms import wizard_form_list
from .models import Candidate
from .services import submit_application
from .steps import EXPERIENCE, LAST_STEP, get_step, get_step_by_name

logger = logging.getLogger(__name__)

WIZARD_PREFIX = "candidature"
WIZARD_STORAGE = "formtools.wizard.storage.session.SessionStorage"
SUBMISSION_KEY = "submission_key"


def show_experience_step(wizard: "CandidateApplicationWizard") -> bool:
    """formtools condition for the experience step."""
    data = wizard.get_accumulated_data(until=EXPERIENCE.name)
    return not should_skip(EXPERIENCE.number, data)


class CandidateApplicationWizard(SessionWizardView):
    form_list = wizard_form_list()
    condition_dict = {EXPERIENCE.name: show_experience_step}
    template_name = "candidature/apply.html"

    def get_prefix(self, request, *args, **kwargs):
        return WIZARD_PREFIX

    def get_accumulated_data(self, until: Optional[str] = None) -> Dict[str, Any]:
        """Merge the valid data stored for each step, in step order.

        Stops before step ``until`` when given.  Reads the raw step data
        from storage so it can be used from ``condition_dict`` callables
        without going through ``get_form_list``.
        """
        data: Dict[str, Any] = {}
        for name, form_class in self.form_list.items():
            if name == until:
                break
            step_data = self.storage.get_step_data(name)
            if step_data is None:
                continue
            form = form_class(data=step_data, prefix=self.get_form_prefix(name, form_class))
            if form.is_valid():
                data.update(form.cleaned_data)
        return data

    def get_next_step(self, step=None):
        if step is None:
            step = self.steps.current
        number = next_step(get_step_by_name(step).number, self.get_accumulated_data())
        following = get_step(number)
        if following.is_confirmation:
            return None
        return following.name

    def get_submission_key(self) -> uuid.UUID:
        extra_data = self.storage.extra_data
        if not extra_data.get(SUBMISSION_KEY):
            extra_data = dict(extra_data, **{SUBMISSION_KEY: str(uuid.uuid4())})
            self.storage.extra_data = extra_data
        return uuid.UUID(extra_data[SUBMISSION_KEY])

    def get_context_data(self, form, **kwargs):
        context = super().get_context_data(form=form, **kwargs)
        context.update(
            {
                "step": get_step_by_name(self.steps.current),
                "total_steps": LAST_STEP,
                "is_last_form_step": self.steps.current == self.steps.last,
            }
        )
        return context

    def get(self, request, *args, **kwargs):
        if self.storage.current_step not in self.get_form_list():
            self.storage.reset()
            self.storage.current_step = self.steps.first
            self.get_submission_key()
            logger.info("Candidature wizard started")
        step_data = self.storage.get_step_data(self.steps.current)
        return self.render(self.get_form(data=step_data))

    def post(self, *args, **kwargs):
        self.get_submission_key()
        return super().post(*args, **kwargs)

    def render_next_step(self, form, **kwargs):
        following = self.steps.next
        self.storage.current_step = following
        logger.info("Candidature wizard moved to step %s", following)
        return redirect("candidature:apply")

    def render_done(self, form, **kwargs):
        try:
            return super().render_done(form, **kwargs)
        except PersistenceError:
            logger.exception("Candidature could not be stored")
            return render(self.request, "candidature/error.html", status=500)

    def done(self, form_list, **kwargs):
        data: Dict[str, Any] = {}
        for form in form_list:
            data.update(form.cleaned_data)
        candidate = submit_application(data, submission_key=self.get_submission_key())
        return redirect("candidature:success", pk=candidate.pk)


@require_POST
def reset_application(request):
    """Abandon the candidature in progress and start over."""
    storage = get_storage(WIZARD_STORAGE, WIZARD_PREFIX, request)
    storage.reset()
    logger.info("Candidature wizard reset")
    messages.info(request, "Votre candidature en cours a été abandonnée.")
    return redirect("candidature:apply")


class CandidateSuccessView(DetailView):
    """Read-only summary of a submitted candidature."""

    queryset = Candidate.objects.filter(status=Candidate.Status.SUBMITTED)
    template_name = "candidature/success.html"
    context_object_name = "candidate"
