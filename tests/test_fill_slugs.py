import pytest
from django.core.management.base import CommandError

from tests.models import Article, Category, Section

pytestmark = pytest.mark.django_db


@pytest.fixture
def legacy_articles():
    # bulk_create не шлёт pre_save — так выглядят записи, созданные до подключения sluggable
    return Article.objects.bulk_create([
        Article(title="Big Launch!"),
        Article(title="Big Launch!"),
        Article(title=""),
        Article(title="Kept", slug="kept-by-hand"),
    ])


def test_fills_empty_slugs(run_command, legacy_articles):
    output = run_command("fill_slugs", "tests.Article")

    assert list(Article.objects.order_by("pk").values_list("title", "slug")) == [
        ("Big Launch!", "big-launch"),
        ("Big Launch!", "big-launch-0"),
        ("", ""),
        ("Kept", "kept-by-hand"),
    ]
    assert "Заполнено: 2, пропущено: 1" in output


def test_dry_run_changes_nothing(run_command, legacy_articles):
    output = run_command("fill_slugs", "tests.Article", "--dry-run")

    assert "big-launch-0" in output
    assert "DRY-RUN" in output
    assert Article.objects.filter(slug="").count() == 3


def test_null_slugs_are_filled(run_command):
    Category.objects.bulk_create([Category(name="Новости")])
    run_command("fill_slugs", "tests.Category")
    assert Category.objects.get().url_name == "novosti"


def test_nothing_to_fill(run_command):
    Article.objects.create(title="Already")
    output = run_command("fill_slugs", "tests.Article")
    assert "нечего заполнять" in output


@pytest.mark.parametrize("label", ["Article", "tests.Missing", "nope.Article"])
def test_bad_model_label(run_command, label):
    with pytest.raises(CommandError):
        run_command("fill_slugs", label)


def test_model_without_sluggable(run_command):
    Section.objects.create(name="News")
    with pytest.raises(CommandError, match="не подключена"):
        run_command("fill_slugs", "tests.Section")
