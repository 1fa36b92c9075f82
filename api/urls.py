from django.urls import path, include, re_path

from players.views import MalformedPlayerPathView

urlpatterns = [
    path("player/", include("players.urls")),
    re_path(r"^player$", MalformedPlayerPathView.as_view()),
]
