from .auth import get_session_user


def session_user(request):
    """Expose the session user to every template as ``session_user``."""
    return {"session_user": get_session_user(request)}
