# Путь: sluggable/__init__.py
# Назначение: Автоматические уникальные slug для моделей Django.
#   Публичный API: sluggable, install_sluggable, SluggableMixin (sluggable.models),
#   normalize (sluggable.slug_utils).

__version__ = "0.1.0"
