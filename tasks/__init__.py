"""Tasks application package.

A small task list owned by users, guarded by the authorization policy
in ``tasks.permissions``.  It does not interact with the candidature
wizard.
"""
