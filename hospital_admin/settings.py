"""
Django settings for the hospital administration app.

All patient, doctor and appointment data lives in the hosted data service
(Supabase). This project keeps no relational database of its own: sessions
are stored in signed cookies and every read/write goes through
``hospital_admin.core.data_service``.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


BASE_DIR = Path(__file__).resolve().parent.parent


SECRET_KEY = os.getenv(
    'DJANGO_SECRET_KEY',
    'django-insecure-7c%w1n4q0k!h2m^s8v@r3x6t+e5b9z(a)d-yj_l*p&uo#gf=i'
)

DEBUG = os.getenv('DJANGO_DEBUG', 'false').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,[::1]').split(',')
    if host.strip()
]


INSTALLED_APPS = [
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'rest_framework',

    'hospital_admin.core',
    'hospital_admin.patients',
    'hospital_admin.doctors',
    'hospital_admin.appointments',
    'hospital_admin.dashboard',
]


MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]


ROOT_URLCONF = 'hospital_admin.urls'


TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'hospital_admin' / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]


WSGI_APPLICATION = 'hospital_admin.wsgi.application'


# No local database: all records live in the data service.
DATABASES = {}

SESSION_ENGINE = 'django.contrib.sessions.backends.signed_cookies'
SESSION_COOKIE_HTTPONLY = True

# Session key holding the data service access token of the signed-in user.
DATA_SERVICE_SESSION_KEY = 'data_service_token'


# Hosted data service (Supabase REST + Auth)
DATA_SERVICE = {
    'BACKEND': os.getenv(
        'DATA_SERVICE_BACKEND',
        'hospital_admin.core.data_service.SupabaseDataService',
    ),
    'URL': os.getenv('SUPABASE_URL', ''),
    'API_KEY': os.getenv('SUPABASE_ANON_KEY', ''),
    'TIMEOUT': float(os.getenv('DATA_SERVICE_TIMEOUT', '10')),
}


TEST_RUNNER = 'hospital_admin.test_runner.HospitalAdminTestRunner'


# Django REST Framework
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'hospital_admin.core.authentication.DataServiceTokenAuthentication',
    ),
    'DEFAULT_PERMISSION_CLASSES': (
        'hospital_admin.core.permissions.HasDataServiceSession',
    ),
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),
    'UNAUTHENTICATED_USER': None,
    'UNAUTHENTICATED_TOKEN': None,
    'COERCE_DECIMAL_TO_STRING': False,
}


LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': False,
        },
        'hospital_admin': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
