"""Session-based authentication helpers.

The logged-in user is identified by ``request.session["user_id"]``; there
is no Django auth backend involved.  A missing or stale id means the
request is anonymous.
"""

from __future__ import annotations

from typing import Optional

from .models import User

SESSION_USER_KEY = "user_id"
SESSION_ROLE_KEY = "role"


def login_user(request, user: User) -> None:
    """Store the user's identity in the session."""
    request.session.cycle_key()
    request.session[SESSION_USER_KEY] = user.id
    request.session[SESSION_ROLE_KEY] = user.role


def get_session_user(request) -> Optional[User]:
    """Return the logged-in user, or ``None`` for anonymous requests."""
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None
    return User.objects.filter(id=user_id).first()
