"""Shared test fixtures for the site."""

from datetime import date
from types import SimpleNamespace

import pytest
from rest_framework.test import APIClient

from blog.models import Post
from portfolio.models import Project


@pytest.fixture
def item():
    """Plain content record, as the aggregation helpers see it."""
    def _item(slug='item', date='2024-01-01', tags=None, published=True, featured=False):
        return SimpleNamespace(slug=slug, date=date, tags=tags, published=published, featured=featured)
    return _item


@pytest.fixture
def api_client():
    return APIClient()


def _content_fields(slug, on, tags, published, **extra):
    fields = {
        'slug': slug,
        'title': extra.pop('title', slug.replace('-', ' ').title()),
        'description': extra.pop('description', f"About {slug}"),
        'date': date.fromisoformat(on),
        'tags': tags if tags is not None else [],
        'published': published,
        'body': extra.pop('body', f"# {slug}"),
    }
    fields.update(extra)
    return fields


@pytest.fixture
def make_post(db):
    def _make(slug, on='2024-01-01', tags=None, published=True, **extra):
        return Post.objects.create(**_content_fields(slug, on, tags, published, **extra))
    return _make


@pytest.fixture
def make_project(db):
    def _make(slug, on='2024-01-01', tags=None, published=True, featured=False, **extra):
        return Project.objects.create(
            featured=featured,
            **_content_fields(slug, on, tags, published, **extra),
        )
    return _make


@pytest.fixture
def content_dir(tmp_path):
    """Content tree with blog/ and projects/ folders."""
    (tmp_path / 'blog').mkdir()
    (tmp_path / 'projects').mkdir()
    return tmp_path


@pytest.fixture
def write_content(content_dir):
    """Write a markdown file with front matter into the content tree."""
    def _write(folder, name, front_matter, body='Body text.'):
        path = content_dir / folder / name
        path.write_text(f"---\n{front_matter.strip()}\n---\n{body}\n", encoding='utf-8')
        return path
    return _write
