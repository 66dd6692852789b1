# Путь: sluggable/stores.py
# Назначение: Django-адаптеры для resolver.create_slug:
#   • DjangoRecord — чтение/запись полей инстанса по имени + ошибки валидации.
#   • DjangoSlugStore — проверка «занят ли slug» через ORM и transaction.atomic.

from django.db import transaction
from django.db.models import Q


class DjangoRecord:
    def __init__(self, instance):
        self.instance = instance

    @property
    def pk(self):
        return self.instance.pk

    def get(self, name):
        return getattr(self.instance, name, None)

    def set(self, name, value):
        setattr(self.instance, name, value)

    def has_errors(self) -> bool:
        # validation_errors выставляет SluggableMixin.full_clean()
        return bool(getattr(self.instance, "validation_errors", None))


def as_q(scope_filter) -> Q:
    if scope_filter is None:
        return Q()
    if isinstance(scope_filter, Q):
        return scope_filter
    if isinstance(scope_filter, dict):
        return Q(**scope_filter)
    raise TypeError(f"scope должен давать Q или dict, получено {type(scope_filter).__name__}")


class DjangoSlugStore:
    def __init__(self, model, using=None):
        self.model = model
        self.using = using

    def atomic(self):
        return transaction.atomic(using=self.using)

    def exists(self, slug_field, value, scope_filter=None, exclude=None) -> bool:
        qs = self.model._default_manager.using(self.using).filter(**{slug_field: value})
        qs = qs.filter(as_q(scope_filter))
        if exclude is not None:
            qs = qs.exclude(pk=exclude)
        return qs.exists()
