from django.conf import settings
from django.http import HttpResponse
from django.views.decorators.csrf import csrf_exempt
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from portfolio.models import Project
from portfolio.serializers import ProjectSerializer
from .banner import render_banner
from .models import Post
from .pagination import PageQueryPagination
from .serializers import PostSerializer, PostDetailSerializer, TagSerializer
from .utils import (build_tag_cloud, get_all_tags, get_items_by_tag_slug,
                    published_only, sort_posts, sort_projects)


# Список постов в блоге
class PostViewSet(viewsets.ReadOnlyModelViewSet):
    """
    GET /api/posts/?page=N  — опубликованные посты, свежие сверху
    GET /api/posts/{slug}/  — один пост (неопубликованный = 404)
    """
    lookup_field = 'slug'
    pagination_class = PageQueryPagination

    @property
    def page_size(self):
        return settings.POSTS_PER_PAGE

    def get_queryset(self):
        return Post.objects.published()

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return PostDetailSerializer
        return PostSerializer

    def list(self, request, *args, **kwargs):
        posts = sort_posts(self.get_queryset())
        page = self.paginate_queryset(posts)
        serializer = self.get_serializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @action(detail=False, methods=['get'], url_path='tags')
    def tags(self, request):
        """GET /api/posts/tags/ — теги блога по частоте"""
        cloud = build_tag_cloud(get_all_tags(self.get_queryset()))
        return Response(TagSerializer(cloud, many=True).data)


def published_items():
    # черновики не попадают ни в счётчики, ни на страницы тегов
    return published_only(list(Post.objects.all()) + list(Project.objects.all()))


class TagListView(APIView):
    """GET /api/tags/ — все теги постов и проектов"""

    def get(self, request):
        cloud = build_tag_cloud(get_all_tags(published_items()))
        return Response(TagSerializer(cloud, many=True).data)


class TagDetailView(APIView):
    """
    GET /api/tags/{slug}/ — посты и проекты по тегу.
    Совпадение по slug тега, а не по исходной строке.
    Ничего не нашли — пустые списки, фронт сам покажет "nothing found".
    """

    def get(self, request, tag):
        posts = sort_posts(get_items_by_tag_slug(Post.objects.published(), tag))
        projects = sort_projects(get_items_by_tag_slug(Project.objects.published(), tag))
        cloud = build_tag_cloud(get_all_tags(published_items()), current_slug=tag)

        return Response({
            'tag': tag,
            'title': ' '.join(tag.split('-')),
            'posts': PostSerializer(posts, many=True).data,
            'projects': ProjectSerializer(projects, many=True).data,
            'tags': TagSerializer(cloud, many=True).data,
        })


class AboutView(APIView):
    """GET /api/about/ — профиль автора для страницы About"""

    def get(self, request):
        site = settings.SITE
        return Response({
            'name': site.get('name'),
            'url': site.get('url'),
            'author': site.get('author'),
            'role': site.get('role'),
            'description': site.get('description'),
            'avatar': site.get('avatar'),
            'bio': site.get('bio'),
            'links': site.get('links', {}),
        })


# Сюда middleware переписывает запросы от curl/wget
@csrf_exempt
def curl_response(request):
    body = render_banner(settings.SITE, color=getattr(settings, 'CLI_BANNER_COLOR', True))
    return HttpResponse(body, status=200, content_type='text/plain; charset=utf-8')
