from unittest.mock import patch

import pytest
from django.apps import apps
from django.core.cache import cache
from rest_framework.test import APIClient

from players.store import InMemoryPlayerStore
from .utils import FakePlayGames

CLIENT_ID = "1234567890-abcdef.apps.googleusercontent.com"


@pytest.fixture(autouse=True)
def clear_sessions():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def store(monkeypatch):
    """Fresh store in place of the process wide one."""
    store = InMemoryPlayerStore()
    monkeypatch.setattr(apps.get_app_config("players"), "store", store)
    return store


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_secrets(settings):
    settings.PLAY_GAMES = {
        **settings.PLAY_GAMES,
        "CLIENT_ID": CLIENT_ID,
        "CLIENT_SECRET": "s3cret",
    }
    return settings.PLAY_GAMES


@pytest.fixture
def missing_secrets(settings, tmp_path):
    settings.PLAY_GAMES = {
        **settings.PLAY_GAMES,
        "CLIENT_ID": "",
        "CLIENT_SECRET": "",
        "CLIENT_SECRET_FILE": str(tmp_path / "client_secret.json"),
    }
    return settings.PLAY_GAMES


@pytest.fixture
def play_games(client_secrets):
    fake = FakePlayGames()
    with patch("players.utils.oauth.requests.post", side_effect=fake.post), \
            patch("players.utils.games_api.requests.get", side_effect=fake.get):
        yield fake
