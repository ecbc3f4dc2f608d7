"""
WSGI config for cinema_server project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'cinema_server.settings')

application = get_wsgi_application()
