# Путь: sluggable/signals.py
# Назначение: pre_save-ресивер, который проставляет slug перед сохранением.
# Подключается не декоратором @receiver, а в install_sluggable() — отдельно для каждой модели.

from .resolver import create_slug
from .stores import DjangoRecord, DjangoSlugStore


def create_slug_on_save(sender, instance, raw=False, using=None, **kwargs):
    # raw=True — загрузка фикстур (loaddata), данные кладём как есть
    if raw:
        return
    options = getattr(sender, "sluggable_options", None)
    if options is None:
        return
    create_slug(DjangoRecord(instance), DjangoSlugStore(sender, using=using), options)
