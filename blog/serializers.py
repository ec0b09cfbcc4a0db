from rest_framework import serializers

from .models import Post
from .utils import format_date, tag_slug


class TagSerializer(serializers.Serializer):
    name = serializers.CharField()
    slug = serializers.CharField()
    count = serializers.IntegerField()
    current = serializers.BooleanField(default=False)


class ContentItemSerializer(serializers.ModelSerializer):
    """Общие поля для постов и проектов в списках."""
    tags = serializers.SerializerMethodField()
    display_date = serializers.SerializerMethodField()

    def get_tags(self, obj):
        # тег + его slug, чтобы фронт строил ссылки /tags/<slug>
        return [{'name': t, 'slug': tag_slug(t)} for t in obj.tags or []]

    def get_display_date(self, obj):
        return format_date(obj.date)


class PostSerializer(ContentItemSerializer):
    class Meta:
        model = Post
        fields = ('slug', 'title', 'description', 'date', 'display_date', 'tags')


class PostDetailSerializer(PostSerializer):
    class Meta(PostSerializer.Meta):
        fields = PostSerializer.Meta.fields + ('body', 'updated_at')
