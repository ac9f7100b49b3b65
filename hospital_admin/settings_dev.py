"""
Development settings for the hospital administration app.

Usage:
    export DJANGO_SETTINGS_MODULE=hospital_admin.settings_dev
    python manage.py runserver
"""

from .settings import *

# ---------------------------------------------------------
# DEVELOPMENT SETTINGS
# ---------------------------------------------------------

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '[::1]', '*']

INSTALLED_APPS = INSTALLED_APPS + ['corsheaders']

# CorsMiddleware must come before CommonMiddleware
MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    *MIDDLEWARE,
]

CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        'CORS_ALLOWED_ORIGINS',
        'http://localhost:3000,http://localhost:5173,http://127.0.0.1:5173',
    ).split(',')
    if origin.strip()
]
CORS_ALLOW_CREDENTIALS = True

LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')
LOGGING['loggers']['hospital_admin']['level'] = LOG_LEVEL
