from django.db import models

from blog.models import ContentItem


class Project(ContentItem):
    class Status(models.TextChoices):
        COMPLETED = 'completed', 'Completed'
        IN_PROGRESS = 'in-progress', 'In Progress'
        ARCHIVED = 'archived', 'Archived'

    status = models.CharField(max_length=20, choices=Status.choices, default=Status.COMPLETED)
    featured = models.BooleanField(default=False)
    live_url = models.URLField(blank=True)
    github_url = models.URLField(blank=True)

    class Meta(ContentItem.Meta):
        ordering = ('-featured', '-date')
