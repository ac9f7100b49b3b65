from django.apps import AppConfig


class DoctorsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hospital_admin.doctors'
    verbose_name = 'Doctors'
