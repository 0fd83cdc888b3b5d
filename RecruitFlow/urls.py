"""
URL configuration for the RecruitFlow project.

This module maps URL paths to application URL configurations.  The
candidature wizard lives at the site root (``/apply/``, ``/success/<id>/``),
tasks and user sessions under their own prefixes.
"""

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("candidature.urls")),
    path("tasks/", include("tasks.urls")),
    path("user/", include("users.urls")),
]
