"""
Step sequencing for the candidature wizard.

Both functions are pure: they only look at the data passed in, which the
wizard assembles from the steps already stored in the session.
"""

from __future__ import annotations

from typing import Any, Mapping

from .steps import EXPERIENCE, LAST_STEP, get_step


def should_skip(step_number: int, accumulated_data: Mapping[str, Any]) -> bool:
    """Return True when step ``step_number`` must not be shown.

    Only the experience step is optional: it is skipped unless the
    candidate said they have professional experience.
    """
    get_step(step_number)
    if step_number == EXPERIENCE.number:
        return not accumulated_data.get("has_experience")
    return False


def next_step(current: int, accumulated_data: Mapping[str, Any]) -> int:
    """Number of the first step after ``current`` that is not skipped.

    The confirmation step is never skipped, so the result is at most the
    last step number.
    """
    for number in range(current + 1, LAST_STEP + 1):
        if not should_skip(number, accumulated_data):
            return number
    raise ValueError(f"No step after {current}")
