"""
Authorization rules for tasks.

``TaskPolicy`` answers whether a user may VIEW, EDIT or DELETE a task:

- anonymous users are denied everything,
- deleting is disabled for every user, administrators included,
- administrators may view and edit any task,
- other users may view and edit the tasks they wrote.

Views call ``deny_unless_granted`` which raises ``AuthorizationDenied``;
Django turns it into a 403 response.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from django.core.exceptions import PermissionDenied

from users.models import User
from .models import Task

logger = logging.getLogger(__name__)


class AuthorizationDenied(PermissionDenied):
    """The current user may not perform the requested action on a task."""


class TaskPolicy:
    VIEW = "VIEW"
    EDIT = "EDIT"
    DELETE = "DELETE"

    ACTIONS = (VIEW, EDIT, DELETE)

    def supports(self, action: str, subject: Any) -> bool:
        return action in self.ACTIONS and isinstance(subject, Task)

    def is_granted(self, action: str, task: Task, user: Optional[User]) -> bool:
        if not self.supports(action, task):
            return False
        # Anonymous users are never granted access
        if user is None:
            return False
        if action == self.DELETE:
            return self.can_delete(task, user)
        if user.is_admin:
            return True
        if action == self.EDIT:
            return self.can_edit(task, user)
        return self.can_view(task, user)

    def can_edit(self, task: Task, user: User) -> bool:
        return task.author_id == user.id

    def can_view(self, task: Task, user: User) -> bool:
        return task.author_id == user.id

    def can_delete(self, task: Task, user: User) -> bool:
        return False


task_policy = TaskPolicy()


def deny_unless_granted(action: str, task: Task, user: Optional[User]) -> None:
    """Raise ``AuthorizationDenied`` unless ``user`` may perform ``action``."""
    if not task_policy.is_granted(action, task, user):
        logger.warning(
            "Denied %s on task %s for %s", action, task.pk, user.username if user else "anonymous"
        )
        raise AuthorizationDenied
