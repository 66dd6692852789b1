# Путь: sluggable/management/commands/fill_slugs.py
# Назначение: Заполнить пустые slug у уже существующих записей sluggable-модели.
# Запуск:
#   python manage.py fill_slugs app_label.ModelName --dry-run
#   python manage.py fill_slugs app_label.ModelName
# Примечания:
#   - Заполненные slug не трогаем: запись просто пересохраняется, slug ставит pre_save.
#   - --dry-run выполняет всё в транзакции и откатывает её (план с учётом суффиксов).

from django.apps import apps
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.db.models import Q


class Command(BaseCommand):
    help = "Заполняет пустые slug у существующих записей модели с @sluggable."

    def add_arguments(self, parser):
        parser.add_argument("model", help="app_label.ModelName (например: pages.page)")
        parser.add_argument("--dry-run", action="store_true", help="Показать план (без изменений)")

    def handle(self, *args, **opts):
        model_label = opts["model"]
        dry = opts["dry_run"]

        try:
            app_label, model_name = model_label.split(".", 1)
        except ValueError:
            raise CommandError("Формат: app_label.ModelName (пример: pages.page)")

        try:
            model = apps.get_model(app_label, model_name)
        except LookupError:
            raise CommandError(f"Модель {model_label} не найдена")

        options = getattr(model, "sluggable_options", None)
        if options is None:
            raise CommandError(f"Модель {model_label} не подключена к sluggable")

        slug_field = options.slug_field
        empty = Q(**{slug_field: ""}) | Q(**{f"{slug_field}__isnull": True})
        objs = list(model._default_manager.filter(empty).order_by("pk"))
        if not objs:
            self.stdout.write(self.style.SUCCESS(f"В {model_label} нечего заполнять."))
            return

        filled = skipped = 0
        with transaction.atomic():
            for obj in objs:
                obj.save(update_fields=[slug_field])
                value = getattr(obj, slug_field)
                if value:
                    filled += 1
                    self.stdout.write(f"{obj.pk:>6} → {value}")
                else:
                    skipped += 1
                    self.stdout.write(f"{obj.pk:>6} → (пустой источник, пропуск)")
            if dry:
                transaction.set_rollback(True)

        if dry:
            self.stdout.write(self.style.SUCCESS(f"DRY-RUN завершён. БД не изменена. К заполнению: {filled}"))
            return
        self.stdout.write(self.style.SUCCESS(f"✓ Заполнено: {filled}, пропущено: {skipped}"))
