"""Tests for import_content and seed_content management commands."""

from datetime import date
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from blog.models import Post
from portfolio.models import Project


def run(*args, **options):
    out = StringIO()
    call_command(*args, stdout=out, **options)
    return out.getvalue()


@pytest.mark.django_db
class TestImportContent:
    def test_imports_posts_and_projects(self, content_dir, write_content):
        write_content('blog', 'hello.md', "title: Hello\ndate: 2024-01-01\ntags: [Go]")
        write_content('projects', 'tool.mdx', "title: Tool\ndate: 2023-05-05\nfeatured: true")

        output = run('import_content', content_dir=str(content_dir))

        post = Post.objects.get(slug='hello')
        assert post.tags == ['Go']
        assert post.date == date(2024, 1, 1)
        assert Project.objects.get(slug='tool').featured is True
        assert "posts: 1 created, 0 updated, 0 deleted." in output
        assert "projects: 1 created, 0 updated, 0 deleted." in output

    def test_reimport_updates(self, content_dir, write_content):
        path = write_content('blog', 'hello.md', "title: Hello\ndate: 2024-01-01")
        run('import_content', content_dir=str(content_dir))
        path.write_text("---\ntitle: Hello again\ndate: 2024-01-01\n---\n", encoding='utf-8')

        output = run('import_content', content_dir=str(content_dir))

        assert Post.objects.count() == 1
        assert Post.objects.get(slug='hello').title == 'Hello again'
        assert "posts: 0 created, 1 updated" in output

    def test_skips_broken_files(self, content_dir, write_content):
        write_content('blog', 'good.md', "title: Good\ndate: 2024-01-01")
        write_content('blog', 'bad.md', "title: Bad")

        output = run('import_content', content_dir=str(content_dir))

        assert list(Post.objects.values_list('slug', flat=True)) == ['good']
        assert "Skipped" in output
        assert "date is required" in output

    def test_duplicate_slugs(self, content_dir, write_content):
        write_content('blog', 'a.md', "title: First\ndate: 2024-01-01\nslug: same")
        write_content('blog', 'b.md', "title: Second\ndate: 2024-01-01\nslug: same")

        output = run('import_content', content_dir=str(content_dir))

        assert Post.objects.get(slug='same').title == 'First'
        assert "Duplicate post slug 'same'" in output

    def test_prune(self, content_dir, write_content, make_post):
        make_post('stale')
        write_content('blog', 'fresh.md', "title: Fresh\ndate: 2024-01-01")

        run('import_content', content_dir=str(content_dir))
        assert Post.objects.filter(slug='stale').exists()

        output = run('import_content', content_dir=str(content_dir), prune=True)
        assert not Post.objects.filter(slug='stale').exists()
        assert "1 deleted." in output

    def test_prune_keeps_records_of_broken_files(self, content_dir, write_content):
        path = write_content('blog', 'hello.md', "title: Hello\ndate: 2024-01-01")
        write_content('blog', 'named.md', "title: Named\ndate: 2024-01-01\nslug: Custom Name")
        run('import_content', content_dir=str(content_dir))
        assert set(Post.objects.values_list('slug', flat=True)) == {'hello', 'custom-name'}

        path.write_text("---\ntitle: Hello\ndate: 2024-01-01\ntags: Go\n---\n", encoding='utf-8')
        write_content('blog', 'named.md', "title: Named\nslug: Custom Name")

        output = run('import_content', content_dir=str(content_dir), prune=True)

        assert set(Post.objects.values_list('slug', flat=True)) == {'hello', 'custom-name'}
        assert "Skipped" in output
        assert "posts: 0 created, 0 updated, 0 deleted." in output

    def test_prune_skips_missing_folder(self, tmp_path, make_project):
        make_project('tool')
        (tmp_path / 'blog').mkdir()
        (tmp_path / 'blog' / 'hello.md').write_text(
            "---\ntitle: Hello\ndate: 2024-01-01\n---\n", encoding='utf-8'
        )

        output = run('import_content', content_dir=str(tmp_path), prune=True)

        assert Project.objects.filter(slug='tool').exists()
        assert Post.objects.filter(slug='hello').exists()
        assert "No projects/ folder" in output
        assert "projects: 0 created, 0 updated, 0 deleted." in output

    def test_missing_directory(self, tmp_path):
        with pytest.raises(CommandError, match="not found"):
            run('import_content', content_dir=str(tmp_path / 'missing'))

    def test_uses_settings_content_dir(self, content_dir, write_content, settings):
        settings.CONTENT_DIR = content_dir
        write_content('blog', 'hello.md', "title: Hello\ndate: 2024-01-01")
        run('import_content')
        assert Post.objects.filter(slug='hello').exists()


@pytest.mark.django_db
class TestSeedContent:
    def test_creates_requested_amount(self):
        output = run('seed_content', posts=3, projects=2, seed=42)
        assert Post.objects.count() == 3
        assert Project.objects.count() == 2
        assert "Successfully created 3 posts and 2 projects." in output

    def test_projects_have_valid_status(self):
        run('seed_content', posts=0, projects=5, seed=1)
        statuses = set(Project.objects.values_list('status', flat=True))
        assert statuses <= set(Project.Status.values)
