from django.apps import AppConfig

class TransmissionsConfig(AppConfig):
    """Django app config for transmissions; loads signal handlers on ready."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'transmissions'

    def ready(self):
        """Import signal modules to register handlers."""
        import transmissions.signals
