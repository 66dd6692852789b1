# Путь: sluggable/conf.py
# Назначение: Настройки slug-поведения модели.
#   • Дефолты проекта — settings.SLUGGABLE (читаются один раз при подключении модели).
#   • SlugOptions — неизменяемый объект, общий для всех записей модели.
#   • Scope: ReferenceField(имя FK-колонки) или Predicate(Q / dict / callable).
# Пример settings.py:
#   SLUGGABLE = {"SOURCE_FIELD": "title", "MAX_SLUG_LENGTH": 80}

from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import Any, Optional, Union

from django.conf import settings
from django.core.exceptions import FieldDoesNotExist, ImproperlyConfigured
from django.db.models import Q

DEFAULTS = MappingProxyType({
    "SOURCE_FIELD": "name",
    "SLUG_FIELD": "slug",
    "SCOPE": None,
    "MAX_SLUG_LENGTH": 50,
    "TRANSLITERATE": False,
    "MAX_ATTEMPTS": None,
    "INTEGRITY_RETRIES": 3,
})


@dataclass(frozen=True)
class ReferenceField:
    """Уникальность среди записей с тем же значением колонки (обычно FK: parent_id)."""
    name: str

    def filter_for(self, record) -> dict:
        return {self.name: record.get(self.name)}


@dataclass(frozen=True)
class Predicate:
    """Произвольное условие: Q, dict для filter(**...) или callable(instance) -> Q/dict."""
    expression: Any

    def filter_for(self, record):
        expression = self.expression
        if callable(expression):
            expression = expression(record.instance)
        return expression


Scope = Union[ReferenceField, Predicate]


@dataclass(frozen=True)
class SlugOptions:
    source_field: str = DEFAULTS["SOURCE_FIELD"]
    slug_field: str = DEFAULTS["SLUG_FIELD"]
    scope: Optional[Scope] = DEFAULTS["SCOPE"]
    max_slug_length: int = DEFAULTS["MAX_SLUG_LENGTH"]
    transliterate: bool = DEFAULTS["TRANSLITERATE"]
    max_attempts: Optional[int] = DEFAULTS["MAX_ATTEMPTS"]
    integrity_retries: int = DEFAULTS["INTEGRITY_RETRIES"]


OPTION_NAMES = frozenset(f.name for f in fields(SlugOptions))


def coerce_scope(scope) -> Optional[Scope]:
    """
    None            -> без ограничения
    "parent"        -> ReferenceField("parent_id")  (суффикс _id добавляется один раз)
    "parent_id"     -> ReferenceField("parent_id")
    Q / dict / func -> Predicate(...)
    """
    if scope is None or isinstance(scope, (ReferenceField, Predicate)):
        return scope
    if isinstance(scope, str):
        if not scope:
            raise ImproperlyConfigured("invalid scope specification: пустое имя поля")
        return ReferenceField(scope if scope.endswith("_id") else f"{scope}_id")
    if isinstance(scope, (Q, dict)) or callable(scope):
        return Predicate(scope)
    raise ImproperlyConfigured(f"invalid scope specification: {scope!r}")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_options(options: SlugOptions) -> SlugOptions:
    for name in ("source_field", "slug_field"):
        value = getattr(options, name)
        if not isinstance(value, str) or not value:
            raise ImproperlyConfigured(f"sluggable: {name} должен быть непустой строкой, получено {value!r}")
    if not _is_int(options.max_slug_length) or options.max_slug_length < 0:
        raise ImproperlyConfigured(
            f"sluggable: max_slug_length должен быть целым >= 0, получено {options.max_slug_length!r}"
        )
    if options.max_attempts is not None and (not _is_int(options.max_attempts) or options.max_attempts < 1):
        raise ImproperlyConfigured(
            f"sluggable: max_attempts должен быть None или целым >= 1, получено {options.max_attempts!r}"
        )
    if not _is_int(options.integrity_retries) or options.integrity_retries < 0:
        raise ImproperlyConfigured(
            f"sluggable: integrity_retries должен быть целым >= 0, получено {options.integrity_retries!r}"
        )
    return replace(options, scope=coerce_scope(options.scope))


def project_defaults() -> SlugOptions:
    """Дефолты из settings.SLUGGABLE поверх встроенных DEFAULTS."""
    configured = getattr(settings, "SLUGGABLE", None) or {}
    unknown = set(configured) - set(DEFAULTS)
    if unknown:
        raise ImproperlyConfigured(f"SLUGGABLE: неизвестные ключи {sorted(unknown)}")
    merged = {**DEFAULTS, **configured}
    return check_options(SlugOptions(**{key.lower(): value for key, value in merged.items()}))


def build_options(base: Optional[SlugOptions] = None, **overrides) -> SlugOptions:
    unknown = set(overrides) - OPTION_NAMES
    if unknown:
        raise ImproperlyConfigured(f"sluggable: неизвестные опции {sorted(unknown)}")
    options = base if base is not None else project_defaults()
    return check_options(replace(options, **overrides))


def validate_for_model(options: SlugOptions, model) -> None:
    """Все упомянутые поля должны существовать в модели (FK можно указывать как parent_id)."""
    names = [options.source_field, options.slug_field]
    if isinstance(options.scope, ReferenceField):
        names.append(options.scope.name)
    for name in names:
        try:
            model._meta.get_field(name)
        except FieldDoesNotExist:
            raise ImproperlyConfigured(f"sluggable: в модели {model._meta.label} нет поля '{name}'")
