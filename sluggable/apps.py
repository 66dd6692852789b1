# Путь: sluggable/apps.py
# Назначение: Конфигурация приложения sluggable.
# В settings.py добавьте 'sluggable' в INSTALLED_APPS (нужно для команды fill_slugs).

from django.apps import AppConfig


class SluggableConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "sluggable"
    verbose_name = "Слаги"

    def ready(self):
        # Ошибки в settings.SLUGGABLE должны всплывать при старте, а не при первом save()
        from .conf import project_defaults
        project_defaults()
