import pytest

from sluggable.signals import create_slug_on_save
from tests.models import Article, Chapter, Post, Section

pytestmark = pytest.mark.django_db


def test_big_launch_scenario():
    first = Article.objects.create(title="Big Launch!")
    second = Article.objects.create(title="Big Launch!")
    third = Article.objects.create(title="Big Launch!")
    assert [first.slug, second.slug, third.slug] == ["big-launch", "big-launch-0", "big-launch-1"]


def test_slug_is_persisted():
    article = Article.objects.create(title="Héllo, World!")
    assert Article.objects.get(pk=article.pk).slug == "hello-world"


def test_existing_slug_is_kept():
    article = Article.objects.create(title="Some Title", slug="hand-made")
    article.title = "Changed Title"
    article.save()
    article.refresh_from_db()
    assert article.slug == "hand-made"


def test_slug_is_not_regenerated_on_update():
    article = Article.objects.create(title="First")
    article.title = "Second"
    article.save()
    assert article.slug == "first"


def test_blank_title_leaves_slug_empty():
    article = Article.objects.create(title="   ")
    assert article.slug == ""


def test_clearing_slug_regenerates_it_without_self_collision():
    article = Article.objects.create(title="Rock & Roll")
    article.slug = ""
    article.save()
    assert article.slug == "rock-and-roll"


def test_raw_save_is_left_alone():
    article = Article(title="From Fixture")
    create_slug_on_save(Article, article, raw=True)
    assert article.slug == ""


def test_reference_scope():
    news = Section.objects.create(name="News")
    blog = Section.objects.create(name="Blog")
    a = Chapter.objects.create(section=news, title="Intro")
    b = Chapter.objects.create(section=blog, title="Intro")
    c = Chapter.objects.create(section=news, title="Intro")
    assert (a.slug, b.slug, c.slug) == ("intro", "intro", "intro-0")


def test_reference_scope_with_null_parent():
    a = Chapter.objects.create(title="Orphan")
    b = Chapter.objects.create(title="Orphan")
    assert (a.slug, b.slug) == ("orphan", "orphan-0")


def test_predicate_scope_only_counts_matching_rows():
    draft = Post.objects.create(title="Hello")
    another_draft = Post.objects.create(title="Hello")
    assert (draft.slug, another_draft.slug) == ("hello", "hello")

    Post.objects.filter(pk=draft.pk).update(published=True)
    third = Post.objects.create(title="Hello")
    assert third.slug == "hello-0"
