# Путь: sluggable/exceptions.py
# Назначение: Исключения slug-поведения. Ошибки конфигурации — стандартный ImproperlyConfigured Django.


class SluggableError(Exception):
    """Базовая ошибка приложения sluggable."""


class SlugCollisionError(SluggableError):
    """Не удалось подобрать свободный slug за max_attempts попыток."""

    def __init__(self, candidate: str, attempts: int):
        self.candidate = candidate
        self.attempts = attempts
        super().__init__(f"Нет свободного slug для '{candidate}' за {attempts} попыток")
