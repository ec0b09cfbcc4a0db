from django.conf import settings
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from blog.pagination import PageQueryPagination
from blog.serializers import TagSerializer
from blog.utils import build_tag_cloud, get_all_tags, sort_projects
from .models import Project
from .serializers import ProjectSerializer, ProjectDetailSerializer


class ProjectViewSet(viewsets.ReadOnlyModelViewSet):
    """
    GET /api/projects/?page=N  — featured первыми, дальше по дате
    GET /api/projects/{slug}/  — страница проекта
    """
    lookup_field = 'slug'
    pagination_class = PageQueryPagination

    @property
    def page_size(self):
        return settings.PROJECTS_PER_PAGE

    def get_queryset(self):
        return Project.objects.published()

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return ProjectDetailSerializer
        return ProjectSerializer

    def list(self, request, *args, **kwargs):
        projects = sort_projects(self.get_queryset())
        page = self.paginate_queryset(projects)
        serializer = self.get_serializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @action(detail=False, methods=['get'], url_path='tags')
    def tags(self, request):
        """GET /api/projects/tags/ — блок "Technologies" """
        cloud = build_tag_cloud(get_all_tags(self.get_queryset()))
        return Response(TagSerializer(cloud, many=True).data)
