"""
WSGI config for the hospital administration app.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'hospital_admin.settings')

application = get_wsgi_application()
