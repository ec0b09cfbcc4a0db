from django.core.exceptions import ValidationError
from django.db import models


def validate_tags(value):
    # Строка "Go" — тоже JSON, но тег-облако превратит её в ['g', 'o']
    if not isinstance(value, list) or not all(isinstance(tag, str) for tag in value):
        raise ValidationError('Tags must be a list of strings.', code='invalid_tags')


class PublishedQuerySet(models.QuerySet):
    def published(self):
        return self.filter(published=True)


class ContentItem(models.Model):
    """
    Общие поля постов и проектов.
    Контент приходит из markdown-файлов (manage.py import_content),
    tags — просто список строк как в front matter.
    """
    slug = models.SlugField(max_length=200, unique=True)
    title = models.CharField(max_length=99)
    description = models.TextField(blank=True)
    date = models.DateField()
    tags = models.JSONField(default=list, blank=True, validators=[validate_tags])
    published = models.BooleanField(default=True)
    body = models.TextField(blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PublishedQuerySet.as_manager()

    class Meta:
        abstract = True
        ordering = ('-date',)

    def __str__(self):
        return self.title


class Post(ContentItem):
    pass
