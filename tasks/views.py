"""
Views for the tasks app.

Listing and creating tasks require a logged-in user (session based, see
``users.auth``); unauthenticated visitors are sent to the login page.
Showing, editing and deleting a single task go through
``permissions.deny_unless_granted``, which answers 403 when the policy
refuses the action.
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from users.auth import get_session_user
from .forms import TaskForm
from .models import Task
from .permissions import TaskPolicy, deny_unless_granted

logger = logging.getLogger(__name__)


def task_list(request):
    """List the user's tasks; administrators see every task."""
    user = get_session_user(request)
    if user is None:
        return redirect("login")
    tasks = Task.objects.all() if user.is_admin else Task.objects.filter(author=user)
    return render(request, "tasks/task_list.html", {"tasks": tasks, "user": user})


def task_create(request):
    """Create a task authored by the logged-in user."""
    user = get_session_user(request)
    if user is None:
        return redirect("login")
    if request.method == "POST":
        form = TaskForm(request.POST)
        if form.is_valid():
            task = form.save(commit=False)
            task.author = user
            task.save()
            logger.info("Task %s created by %s", task.pk, user.username)
            messages.success(request, "Tâche créée avec succès.")
            return redirect("task_detail", task_id=task.pk)
    else:
        form = TaskForm()
    return render(request, "tasks/task_form.html", {"form": form, "user": user})


def task_detail(request, task_id: int):
    """Show a single task."""
    user = get_session_user(request)
    task = get_object_or_404(Task, id=task_id)
    deny_unless_granted(TaskPolicy.VIEW, task, user)
    return render(request, "tasks/task_detail.html", {"task": task, "user": user})


def task_edit(request, task_id: int):
    """Edit the title and description of a task."""
    user = get_session_user(request)
    task = get_object_or_404(Task, id=task_id)
    deny_unless_granted(TaskPolicy.EDIT, task, user)
    if request.method == "POST":
        form = TaskForm(request.POST, instance=task)
        if form.is_valid():
            form.save()
            messages.success(request, "Tâche modifiée avec succès.")
            return redirect("task_detail", task_id=task.pk)
    else:
        form = TaskForm(instance=task)
    return render(request, "tasks/task_form.html", {"form": form, "task": task, "user": user})


@require_POST
def task_delete(request, task_id: int):
    """Delete a task.  Deleting is currently disabled for everyone."""
    user = get_session_user(request)
    task = get_object_or_404(Task, id=task_id)
    deny_unless_granted(TaskPolicy.DELETE, task, user)
    return redirect("task_list")
