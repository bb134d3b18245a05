"""
WSGI config for the careercoach project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "careercoach.settings")

application = get_wsgi_application()
