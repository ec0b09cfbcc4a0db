from rest_framework import serializers

from blog.serializers import ContentItemSerializer
from .models import Project


class ProjectSerializer(ContentItemSerializer):
    status_label = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = Project
        fields = (
            'slug', 'title', 'description', 'date', 'display_date', 'tags',
            'status', 'status_label', 'featured', 'live_url', 'github_url',
        )


class ProjectDetailSerializer(ProjectSerializer):
    class Meta(ProjectSerializer.Meta):
        fields = ProjectSerializer.Meta.fields + ('body', 'updated_at')
