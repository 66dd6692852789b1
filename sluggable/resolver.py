# Путь: sluggable/resolver.py
# Назначение: Подбор уникального slug для записи и запись его в slug-поле.
# Логика:
#   • Пропускаем запись с ошибками валидации, с пустым источником или уже заполненным slug.
#   • candidate = normalize(источник); если занят в scope → candidate-0, candidate-1, ... (succ).
#   • Весь цикл проверок идёт в одной транзакции хранилища.
# Важно:
#   • Транзакция лишь сужает окно гонки «проверил → сохранил», но не закрывает его.
#     Надёжная защита — уникальный индекс на (slug, колонки scope) в БД
#     плюс повтор сохранения при IntegrityError (см. SluggableMixin.save).
#   • Сам модуль не знает про Django: record и store передаются снаружи (см. stores.py).

import logging

from .exceptions import SlugCollisionError
from .slug_utils import normalize, succ

logger = logging.getLogger(__name__)


def _blank(value) -> bool:
    return value is None or not str(value).strip()


def create_slug(record, store, options) -> None:
    """
    record — доступ к полям записи: get(name), set(name, value), has_errors(), pk, instance.
    store  — хранилище: atomic() и exists(slug_field, value, scope_filter, exclude).
    """
    if record.has_errors():
        return
    source = record.get(options.source_field)
    if _blank(source):
        return
    if not _blank(record.get(options.slug_field)):
        return

    candidate = normalize(source, options.max_slug_length, transliterate=options.transliterate)
    scope_filter = options.scope.filter_for(record) if options.scope is not None else None

    suffix = ""
    attempts = 0
    with store.atomic():
        while store.exists(options.slug_field, candidate + suffix, scope_filter, exclude=record.pk):
            attempts += 1
            if options.max_attempts is not None and attempts >= options.max_attempts:
                raise SlugCollisionError(candidate, attempts)
            logger.debug("slug '%s' занят, пробуем следующий суффикс", candidate + suffix)
            suffix = succ(suffix) if suffix else "-0"

    slug = candidate + suffix
    record.set(options.slug_field, slug)
    logger.info("slug назначен: %s (попыток: %d)", slug, attempts + 1)
