"""
Views for user authentication.

This module uses Django's class-based views (CBV) for login and sign-up
and a plain function for logout.  The logged-in user is remembered in
the session (see ``users.auth``); the task pages rely on it to decide
who is asking.
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.contrib.auth.hashers import check_password
from django.urls import reverse_lazy
from django.shortcuts import redirect
from django.views.generic import FormView, View

from .auth import SESSION_USER_KEY, login_user
from .forms import LoginForm, SignupForm
from .models import User

logger = logging.getLogger(__name__)


class LoginView(FormView):
    """Handle user login via a form.

    If the submitted credentials are valid, the user's ID and role are
    stored in the session.  Otherwise, an error message is displayed and
    the form is re-rendered.
    """

    template_name = "users/login.html"
    form_class = LoginForm
    success_url = reverse_lazy("task_list")

    def form_valid(self, form: LoginForm):
        username = form.cleaned_data["username"]
        password = form.cleaned_data["password"]
        try:
            user = User.objects.get(username=username)
        except User.DoesNotExist:
            messages.error(self.request, "Utilisateur introuvable.")
            return self.form_invalid(form)
        if not check_password(password, user.password):
            messages.error(self.request, "Mot de passe incorrect.")
            return self.form_invalid(form)
        login_user(self.request, user)
        logger.info("User %s logged in", user.username)
        return super().form_valid(form)


class SignupView(FormView):
    """Handle user registration.

    On successful registration the user is automatically logged in and
    redirected to their task list.  Password hashing is delegated to
    the SignupForm's ``save`` method.
    """

    template_name = "users/signup.html"
    form_class = SignupForm
    success_url = reverse_lazy("task_list")

    def form_valid(self, form: SignupForm):
        user = form.save()
        login_user(self.request, user)
        logger.info("User %s signed up", user.username)
        return super().form_valid(form)


class LogoutView(View):
    """Log the user out and redirect to the login page."""

    def get(self, request, *args, **kwargs):  # type: ignore[override]
        return self.post(request, *args, **kwargs)

    def post(self, request, *args, **kwargs):  # type: ignore[override]
        return logout_view(request)


def logout_view(request):
    """Function-based view for logging out the current user.

    Flushing the session also drops any candidature in progress.
    """

    if SESSION_USER_KEY in request.session:
        request.session.flush()
    else:
        messages.warning(request, "Aucun utilisateur connecté.")
    return redirect("login")
