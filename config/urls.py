from django.contrib import admin
from django.urls import path, include

from blog.views import curl_response

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('blog.urls')),
    path('api/', include('portfolio.urls')),
]

# Баннер для curl/wget (см. blog.middleware.CliBannerMiddleware)
urlpatterns += [
    path('curl-response', curl_response, name='curl-response'),
]
