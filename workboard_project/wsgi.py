"""
WSGI config for workboard_project.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

from django.core.wsgi import get_wsgi_application

import workboard_project.settings.configure  # noqa: F401

application = get_wsgi_application()
