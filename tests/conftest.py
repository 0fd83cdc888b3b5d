"""Shared test fixtures.

Provides user fixtures, a helper logging a test client in through the
session, and helpers posting candidature wizard steps the way the
rendered form does (management form + step-prefixed fields).
"""

from collections.abc import Callable
from typing import Any

import pytest
from django.contrib.auth.hashers import make_password

from users.auth import SESSION_ROLE_KEY, SESSION_USER_KEY
from users.models import User

WIZARD_MANAGEMENT_FIELD = "candidature-current_step"

STEP1_DATA = {
    "first_name": "Test",
    "last_name": "User",
    "email": "test.user@example.com",
    "phone": "0123456789",
    "has_experience": "on",
}


def step_payload(step: str, data: dict[str, Any]) -> dict[str, Any]:
    """Build the POST body of one wizard step."""
    payload = {WIZARD_MANAGEMENT_FIELD: step}
    payload.update({f"{step}-{name}": value for name, value in data.items()})
    return payload


@pytest.fixture()
def post_step(client) -> Callable[..., Any]:
    """Post one wizard step with the Django test client."""

    def _post(step: str, data: dict[str, Any]):
        return client.post("/apply/", step_payload(step, data))

    return _post


def _create_user(username: str, role: str = User.ROLE_MEMBER) -> User:
    return User.objects.create(
        username=username,
        first_name=username.title(),
        last_name="Tester",
        email=f"{username}@example.com",
        password=make_password("secret-pass"),
        role=role,
    )


@pytest.fixture()
def author(db) -> User:
    return _create_user("alice")


@pytest.fixture()
def other_user(db) -> User:
    return _create_user("bob")


@pytest.fixture()
def admin_user(db) -> User:
    return _create_user("carol", role=User.ROLE_ADMIN)


@pytest.fixture()
def login(client) -> Callable[[User], None]:
    """Store ``user`` in the test client's session."""

    def _login(user: User) -> None:
        session = client.session
        session[SESSION_USER_KEY] = user.id
        session[SESSION_ROLE_KEY] = user.role
        session.save()

    return _login
