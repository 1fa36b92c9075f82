from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

docs_url = [
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
]

urlpatterns = [
    path("", include(docs_url)),
    path("", include("api.urls")),
]
