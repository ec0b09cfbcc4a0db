# blog/utils.py
import math
from datetime import date, datetime

from django.utils import dateformat
from django.utils.dateparse import parse_date, parse_datetime
from django.utils.text import slugify
from unidecode import unidecode


# ---------- Теги ----------

def normalize_tag(tag):
    return tag.lower()


def tag_slug(tag):
    """
    Тег -> slug для url.
    Сначала нормализуем, потом транслитерируем и делаем латинский slug,
    поэтому "Go", "go" и "Go!" попадают в один и тот же slug "go".
    """
    return slugify(unidecode(normalize_tag(tag)))


def get_all_tags(items):
    """
    Частоты тегов по коллекции: { тег в нижнем регистре: сколько раз встретился }.
    Элементы без тегов ничего не добавляют.
    """
    tags = {}
    for item in items:
        for tag in getattr(item, 'tags', None) or []:
            normalized = normalize_tag(tag)
            tags[normalized] = tags.get(normalized, 0) + 1
    return tags


def sort_tags_by_count(tags):
    return sorted(tags, key=lambda t: tags[t], reverse=True)


def build_tag_cloud(tags, current_slug=None):
    """Теги для сайдбара: самые частые первыми, текущий помечен current=True."""
    cloud = []
    for name in sort_tags_by_count(tags):
        slug = tag_slug(name)
        cloud.append({
            'name': name,
            'slug': slug,
            'count': tags[name],
            'current': current_slug is not None and slug == current_slug,
        })
    return cloud


def get_items_by_tag_slug(items, slug):
    """Посты/проекты, у которых хотя бы один тег после slugify совпадает со slug."""
    result = []
    for item in items:
        item_tags = getattr(item, 'tags', None)
        if not item_tags:
            continue
        if slug in [tag_slug(t) for t in item_tags]:
            result.append(item)
    return result


# ---------- Сортировка ----------

def published_only(items):
    return [item for item in items if getattr(item, 'published', False)]


def sort_posts(posts):
    # свежие сверху
    return sorted(posts, key=lambda p: p.date, reverse=True)


def sort_projects(projects):
    # сначала featured, внутри каждой группы — по дате, свежие сверху
    return sorted(
        projects,
        key=lambda p: (bool(getattr(p, 'featured', False)), p.date),
        reverse=True,
    )


# ---------- Пагинация ----------

def parse_page(value):
    """?page=... -> номер страницы; всё непонятное (нет, не число, <1) -> 1"""
    try:
        page = int(value)
    except (TypeError, ValueError):
        return 1
    return page if page > 0 else 1


def paginate(items, page_size, page):
    start = page_size * (page - 1)
    return list(items)[start:page_size * page]


def total_pages(count, page_size):
    if page_size <= 0:
        return 0
    return math.ceil(count / page_size)


# ---------- Даты ----------

def format_date(value):
    """2024-01-05 -> "January 5, 2024". Непарсящуюся строку отдаём как есть."""
    if isinstance(value, str):
        try:
            parsed = parse_datetime(value) or parse_date(value)
        except ValueError:
            parsed = None
        if parsed is None:
            return value
        value = parsed
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        return str(value)
    return dateformat.format(value, 'F j, Y')
