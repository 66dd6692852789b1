# Путь: tests/settings.py
# Назначение: Минимальные настройки Django для тестов (SQLite в памяти).

SECRET_KEY = "sluggable-tests"
DEBUG = False
USE_TZ = True

INSTALLED_APPS = [
    "sluggable",
    "tests",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

SLUGGABLE = {
    "MAX_SLUG_LENGTH": 50,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "[{asctime}] {levelname} {name}: {message}", "style": "{"},
    },
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "verbose"}},
    "loggers": {"sluggable": {"handlers": ["console"], "level": "WARNING", "propagate": True}},
}
