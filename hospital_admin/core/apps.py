"""
Core App Configuration
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Entity controller, data service client and session pages."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hospital_admin.core'
    verbose_name = 'Core (Data Service & Controller)'
