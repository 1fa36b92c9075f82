from django.urls import path, re_path

from .views import MalformedPlayerPathView, PlayerView

urlpatterns = [
    path("<str:player_id>", PlayerView.as_view(), name="player"),
    re_path(r"^.*$", MalformedPlayerPathView.as_view(), name="player-malformed"),
]
