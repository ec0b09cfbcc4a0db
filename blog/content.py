"""
Загрузка контента из markdown/mdx файлов с YAML front matter.

    content/
        blog/<slug>.md
        projects/<slug>.mdx

Результат — словари с полями моделей Post / Project, которые
manage.py import_content раскладывает по базе.
"""
import logging
import re
from datetime import date, datetime
from pathlib import Path

import yaml
from django.utils.dateparse import parse_date
from django.utils.text import slugify
from unidecode import unidecode

from portfolio.models import Project

logger = logging.getLogger(__name__)

FRONT_MATTER_RE = re.compile(r'^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n(.*))?$', re.DOTALL)
CONTENT_SUFFIXES = ('.md', '.mdx')
TITLE_MAX_LENGTH = 99

POST = 'post'
PROJECT = 'project'
CONTENT_DIRS = {POST: 'blog', PROJECT: 'projects'}


class ContentError(Exception):
    """
    Битый файл контента. slug — под каким slug-ом запись скорее всего
    лежит в базе (из front matter или имени файла), чтобы --prune её не тронул.
    """
    def __init__(self, message, path=None, slug=None):
        self.message = message
        self.path = path
        self.slug = slug
        super().__init__(f"{path}: {message}" if path else message)


def parse_front_matter(text):
    """Разбивает файл на (front matter dict, тело)."""
    match = FRONT_MATTER_RE.match(text)
    if not match:
        raise ContentError('no front matter block')
    try:
        data = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError as e:
        raise ContentError(f'invalid YAML: {e}') from e
    if not isinstance(data, dict):
        raise ContentError('front matter must be a mapping')
    return data, (match.group(2) or '').strip('\n')


def _coerce_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            parsed = parse_date(value[:10])
        except ValueError:
            parsed = None
        if parsed is not None:
            return parsed
    raise ContentError(f'invalid date: {value!r}')


def _coerce_bool(data, key, default):
    value = data.get(key, default)
    # "false" в кавычках — строка, а не False; молча не приводим
    if not isinstance(value, bool):
        raise ContentError(f'{key} must be true or false, got {value!r}')
    return value


def _content_slug(data, path):
    raw = data.get('slug')
    if raw is None:
        raw = path.stem
    elif not isinstance(raw, (str, int)):
        raise ContentError(f'invalid slug: {raw!r}')
    # "Hello World" -> "hello-world"
    slug = slugify(unidecode(str(raw)))
    if not slug:
        raise ContentError(f'cannot build slug from {raw!r}')
    return slug


def _coerce_tags(value):
    if value is None:
        return []
    if not isinstance(value, list):
        raise ContentError('tags must be a list')
    # yaml превращает "2024" в число — приводим обратно к строке
    return [str(t) for t in value if t is not None and str(t).strip()]


def load_content_file(path, kind):
    path = Path(path)
    # Пока front matter не прочитан, считаем slug по имени файла
    slug = slugify(unidecode(path.stem)) or None
    try:
        data, body = parse_front_matter(path.read_text(encoding='utf-8'))
        slug = _content_slug(data, path)

        title = data.get('title')
        if not isinstance(title, str) or not title.strip():
            raise ContentError('title is required')
        if len(title) > TITLE_MAX_LENGTH:
            raise ContentError(f'title is longer than {TITLE_MAX_LENGTH} characters')
        if 'date' not in data:
            raise ContentError('date is required')

        record = {
            'slug': slug,
            'title': title.strip(),
            'description': str(data.get('description') or ''),
            'date': _coerce_date(data['date']),
            'tags': _coerce_tags(data.get('tags')),
            'published': _coerce_bool(data, 'published', True),
            'body': body,
        }

        if kind == PROJECT:
            status = data.get('status', Project.Status.COMPLETED.value)
            if status not in Project.Status.values:
                raise ContentError(f'unknown status {status!r}')
            record.update({
                'status': status,
                'featured': _coerce_bool(data, 'featured', False),
                'live_url': str(data.get('liveUrl') or data.get('live_url') or ''),
                'github_url': str(data.get('githubUrl') or data.get('github_url') or ''),
            })
    except ContentError as e:
        raise ContentError(e.message, path=path, slug=slug) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(f'cannot read file: {e}', path=path, slug=slug) from e

    return record


def load_content_dir(directory, kind):
    """
    Все файлы одного типа из каталога, по алфавиту.
    Возвращает (records, errors): битые файлы не валят весь импорт.
    """
    directory = Path(directory)
    records, errors = [], []
    if not directory.is_dir():
        return records, errors

    for path in sorted(directory.iterdir()):
        if path.suffix not in CONTENT_SUFFIXES or not path.is_file():
            continue
        try:
            records.append(load_content_file(path, kind))
        except ContentError as e:
            logger.warning('Skipping %s', e)
            errors.append(e)
    return records, errors
