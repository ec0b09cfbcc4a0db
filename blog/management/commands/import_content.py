# blog/management/commands/import_content.py
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from blog.content import CONTENT_DIRS, POST, PROJECT, load_content_dir
from blog.models import Post
from portfolio.models import Project

MODELS = {POST: Post, PROJECT: Project}


class Command(BaseCommand):
    help = "Import posts and projects from markdown files with YAML front matter"

    def add_arguments(self, parser):
        parser.add_argument(
            '--content-dir',
            default=None,
            help="Directory with blog/ and projects/ subfolders (default: settings.CONTENT_DIR)"
        )
        parser.add_argument(
            '--prune', action='store_true',
            help="Delete records whose source file no longer exists"
        )

    def handle(self, *args, **options):
        content_dir = Path(options['content_dir'] or settings.CONTENT_DIR)
        if not content_dir.is_dir():
            raise CommandError(f"Content directory not found: {content_dir}")

        # Сначала читаем все файлы, потом одной транзакцией пишем в базу
        loaded = {}
        for kind, subdir in CONTENT_DIRS.items():
            directory = content_dir / subdir
            if not directory.is_dir():
                self.stdout.write(self.style.WARNING(
                    f"No {subdir}/ folder in {content_dir}, {kind} records left as is"
                ))
            records, errors = load_content_dir(directory, kind)
            for error in errors:
                self.stdout.write(self.style.WARNING(f"Skipped {error}"))
            loaded[kind] = {
                'records': self.dedupe(records, kind),
                # файл на месте, но не прошёл проверку — запись в базе не трогаем
                'skipped': [e.slug for e in errors if e.slug],
                'has_dir': directory.is_dir(),
            }

        with transaction.atomic():
            for kind, batch in loaded.items():
                model = MODELS[kind]
                created = updated = 0
                for record in batch['records']:
                    fields = dict(record)
                    slug = fields.pop('slug')
                    _, was_created = model.objects.update_or_create(slug=slug, defaults=fields)
                    if was_created:
                        created += 1
                    else:
                        updated += 1

                pruned = 0
                if options['prune'] and batch['has_dir']:
                    keep = [r['slug'] for r in batch['records']] + batch['skipped']
                    pruned, _ = model.objects.exclude(slug__in=keep).delete()

                self.stdout.write(self.style.SUCCESS(
                    f"{model._meta.verbose_name_plural}: {created} created, "
                    f"{updated} updated, {pruned} deleted."
                ))

    def dedupe(self, records, kind):
        # Два файла с одним slug — оставляем первый, о втором предупреждаем
        seen = set()
        result = []
        for record in records:
            if record['slug'] in seen:
                self.stdout.write(self.style.WARNING(
                    f"Duplicate {kind} slug '{record['slug']}', skipped"
                ))
                continue
            seen.add(record['slug'])
            result.append(record)
        return result
