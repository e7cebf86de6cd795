from django.apps import AppConfig


class BeersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.beers"
    label = "beers"
    verbose_name = "Beers"
