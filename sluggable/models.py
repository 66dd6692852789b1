# Путь: sluggable/models.py
# Назначение: Подключение slug-поведения к моделям.
# Использование:
#   @sluggable(source_field="title", scope="parent")
#   class Page(SluggableMixin, models.Model):
#       title = models.CharField(max_length=200)
#       slug = models.SlugField(max_length=80, blank=True)
#       parent = models.ForeignKey("self", null=True, blank=True, on_delete=models.CASCADE)
#
#   или явно: install_sluggable(Page, source_field="title")
# Примечания:
#   • SluggableMixin не обязателен: без него slug ставится в pre_save.
#   • С миксином: full_clean() запоминает ошибки (запись с ошибками не получает slug)
#     и save() повторяет сохранение при конфликте уникального индекса на slug.
#   • Если после неудачного full_clean() поля исправили, save() проверит запись заново
#     и тогда назначит slug.

import logging
import re

from django.core.exceptions import NON_FIELD_ERRORS, ImproperlyConfigured, ValidationError
from django.db import IntegrityError, models, transaction
from django.db.models.signals import pre_save

from .conf import build_options, validate_for_model
from .resolver import create_slug
from .signals import create_slug_on_save
from .stores import DjangoRecord, DjangoSlugStore

logger = logging.getLogger(__name__)


def install_sluggable(model, options=None, **overrides):
    """Собирает SlugOptions (settings.SLUGGABLE + overrides) и вешает pre_save на модель."""
    config = build_options(options, **overrides)
    validate_for_model(config, model)
    model.sluggable_options = config
    pre_save.connect(
        create_slug_on_save,
        sender=model,
        weak=False,
        dispatch_uid=f"sluggable.{model._meta.label_lower}",
    )
    logger.debug("sluggable подключён к %s: %s", model._meta.label, config)
    return model


def sluggable(options=None, **overrides):
    def decorator(model):
        return install_sluggable(model, options, **overrides)
    return decorator


def get_options(model):
    options = getattr(model, "sluggable_options", None)
    if options is None:
        raise ImproperlyConfigured(
            f"Модель {model._meta.label} не подключена: используйте @sluggable или install_sluggable()"
        )
    return options


class SluggableMixin(models.Model):
    validation_errors = None
    # slug проставлен нами (а не вручную) и ещё не сохранён
    _slug_generated = False

    class Meta:
        abstract = True

    def assign_slug(self, using=None):
        model = type(self)
        options = get_options(model)
        before = getattr(self, options.slug_field)
        create_slug(DjangoRecord(self), DjangoSlugStore(model, using=using), options)
        if getattr(self, options.slug_field) != before:
            self._slug_generated = True

    def full_clean(self, *args, **kwargs):
        try:
            super().full_clean(*args, **kwargs)
        except ValidationError as exc:
            self.validation_errors = (
                exc.message_dict if hasattr(exc, "error_dict") else {NON_FIELD_ERRORS: exc.messages}
            )
            raise
        self.validation_errors = {}
        self.assign_slug()

    def _revalidate(self):
        """Ошибки прошлого full_clean() могли быть исправлены — проверяем заново перед сохранением."""
        if not self.validation_errors:
            return
        try:
            self.full_clean()
        except ValidationError:
            # ошибки остались в validation_errors, slug не назначаем
            logger.debug("%s: запись с ошибками валидации, slug не назначен", self._meta.label)

    def _is_slug_conflict(self, exc, slug_field) -> bool:
        # колонка целиком: "tests_tag.slug", "(slug)", но не "slug_source"
        column = self._meta.get_field(slug_field).column
        return re.search(rf"\b{re.escape(column)}\b", str(exc), re.IGNORECASE) is not None

    def save(self, *args, **kwargs):
        options = get_options(type(self))
        slug_field = options.slug_field
        self._revalidate()
        # повторяем только если slug сгенерирован нами (в этом save() или в full_clean())
        generated = self._slug_generated or not str(getattr(self, slug_field) or "").strip()
        retries = options.integrity_retries if generated else 0

        attempt = 0
        while True:
            try:
                with transaction.atomic(using=kwargs.get("using")):
                    result = super().save(*args, **kwargs)
                self._slug_generated = False
                return result
            except IntegrityError as exc:
                if attempt >= retries or not self._is_slug_conflict(exc, slug_field):
                    raise
                attempt += 1
                logger.warning(
                    "%s: slug '%s' уже занят в БД, повтор %d/%d",
                    self._meta.label, getattr(self, slug_field), attempt, retries,
                )
                setattr(self, slug_field, "")
