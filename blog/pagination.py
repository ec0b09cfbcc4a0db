from rest_framework.pagination import BasePagination
from rest_framework.response import Response

from .utils import paginate, parse_page, total_pages


class PageQueryPagination(BasePagination):
    """
    ?page=N поверх уже отсортированного списка.
    Страница за пределами списка — пустой results, не 404.
    """
    page_size = 6
    page_query_param = 'page'

    def paginate_queryset(self, queryset, request, view=None):
        self.page_size = getattr(view, 'page_size', None) or self.page_size
        items = list(queryset)
        self.count = len(items)
        self.page = parse_page(request.query_params.get(self.page_query_param))
        return paginate(items, self.page_size, self.page)

    def get_paginated_response(self, data):
        return Response({
            'count': self.count,
            'page': self.page,
            'total_pages': total_pages(self.count, self.page_size),
            'results': data,
        })
