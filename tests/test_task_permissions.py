"""Unit tests for the task authorization policy."""

import pytest

from tasks.models import Task
from tasks.permissions import AuthorizationDenied, TaskPolicy, deny_unless_granted
from users.models import User

policy = TaskPolicy()

AUTHOR = User(id=1, username="alice", role=User.ROLE_MEMBER)
STRANGER = User(id=2, username="bob", role=User.ROLE_MEMBER)
ADMIN = User(id=3, username="carol", role=User.ROLE_ADMIN)
TASK = Task(id=10, title="Relancer le candidat", author=AUTHOR)


class TestSupports:
    def test_known_actions_on_tasks(self) -> None:
        for action in (TaskPolicy.VIEW, TaskPolicy.EDIT, TaskPolicy.DELETE):
            assert policy.supports(action, TASK)

    def test_unknown_action(self) -> None:
        assert not policy.supports("ARCHIVE", TASK)

    def test_other_subject(self) -> None:
        assert not policy.supports(TaskPolicy.VIEW, AUTHOR)
        assert not policy.is_granted(TaskPolicy.VIEW, AUTHOR, ADMIN)


class TestIsGranted:
    @pytest.mark.parametrize("action", [TaskPolicy.VIEW, TaskPolicy.EDIT])
    def test_author_may_view_and_edit(self, action: str) -> None:
        assert policy.is_granted(action, TASK, AUTHOR)

    @pytest.mark.parametrize("action", [TaskPolicy.VIEW, TaskPolicy.EDIT])
    def test_other_member_is_denied(self, action: str) -> None:
        assert not policy.is_granted(action, TASK, STRANGER)

    @pytest.mark.parametrize("action", [TaskPolicy.VIEW, TaskPolicy.EDIT])
    def test_admin_bypasses_ownership(self, action: str) -> None:
        assert policy.is_granted(action, TASK, ADMIN)

    @pytest.mark.parametrize("user", [AUTHOR, STRANGER, ADMIN])
    def test_delete_denied_for_everyone(self, user: User) -> None:
        assert not policy.is_granted(TaskPolicy.DELETE, TASK, user)

    @pytest.mark.parametrize("action", TaskPolicy.ACTIONS)
    def test_anonymous_denied(self, action: str) -> None:
        assert not policy.is_granted(action, TASK, None)


class TestDenyUnlessGranted:
    def test_raises_when_denied(self) -> None:
        with pytest.raises(AuthorizationDenied):
            deny_unless_granted(TaskPolicy.EDIT, TASK, STRANGER)

    def test_silent_when_granted(self) -> None:
        deny_unless_granted(TaskPolicy.EDIT, TASK, AUTHOR)
