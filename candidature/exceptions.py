"""Errors raised by the candidature app outside of form validation."""


class CandidatureError(Exception):
    """Base class for candidature errors."""


class PersistenceError(CandidatureError):
    """Storing the submitted candidature failed.

    The wizard keeps its session state when this is raised so the
    candidate can submit the last step again.
    """


class InvalidStatusTransition(CandidatureError):
    """A candidature status change other than draft -> submitted."""
