from django.apps import AppConfig


class ApiConfig(AppConfig):
    """HTTP surface of the Conduit core."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'api'
    verbose_name = 'Conduit API'
