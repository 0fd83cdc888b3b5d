"""
WSGI config for the RecruitFlow project.

This exposes the WSGI callable as a module-level variable named ``application``
so the candidature wizard can be served by Gunicorn or any WSGI server.
"""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "RecruitFlow.settings")

application = get_wsgi_application()
