"""Users application package.

This package contains the user model, forms, views and URL configuration
for session-based login.  Users own tasks; administrators may view and
edit any task.
"""
