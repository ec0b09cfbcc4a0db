from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import PostViewSet, TagListView, TagDetailView, AboutView

router = DefaultRouter()
router.register(r'posts', PostViewSet, basename='post')

urlpatterns = [
    path('', include(router.urls)),
]

# Теги: общий список и страница тега
urlpatterns += [
    path('tags/', TagListView.as_view(), name='tag-list'),
    path('tags/<str:tag>/', TagDetailView.as_view(), name='tag-detail'),
]

urlpatterns += [
    path('about/', AboutView.as_view(), name='about'),
]
