import pytest
from django.conf import settings
from django.urls import reverse

from authflow.session import PLAYER_ID_KEY
from players.models import Credential


def player_url(player_id):
    return reverse("player", kwargs={"player_id": player_id})


def bind_session(api_client, player_id):
    session = api_client.session
    session[PLAYER_ID_KEY] = player_id
    session.save()
    api_client.cookies[settings.SESSION_COOKIE_NAME] = session.session_key


def test_post_auth_code_creates_player_and_binds_session(api_client, store, play_games):
    response = api_client.post(player_url("abc123"), "code-xyz", format="json")

    assert response.status_code == 200, response.content
    assert response.json() == {
        "playerId": "abc123",
        "displayName": "Abc Player",
        "visibleProfile": True,
        "title": "Rookie",
        "needRefreshToken": True,
    }
    assert len(store) == 1
    assert api_client.session[PLAYER_ID_KEY] == "abc123"


def test_session_cookie_is_servlet_style(api_client, store, play_games):
    response = api_client.post(player_url("abc123"), "code-xyz", format="json")

    assert "JSESSIONID" in response.cookies


def test_post_then_get_same_session(api_client, store, play_games):
    play_games.token["refresh_token"] = "1//refresh"
    api_client.post(player_url("abc123"), "code-xyz", format="json")

    response = api_client.get(player_url("abc123"))

    assert response.status_code == 200
    body = response.json()
    assert body["playerId"] == "abc123"
    assert body["needRefreshToken"] is False
    assert "credential" not in body
    assert "altPlayerId" not in body


def test_sample_player_ignores_session_and_store(api_client, store):
    bind_session(api_client, "abc123")

    response = api_client.get(player_url("test"))

    assert response.status_code == 200
    assert response.json() == {
        "playerId": "player_123",
        "displayName": "Test player",
        "visibleProfile": False,
        "title": "",
        "needRefreshToken": True,
    }
    assert len(store) == 0
    assert api_client.session[PLAYER_ID_KEY] == "abc123"


def test_sample_player_without_session(api_client, store):
    response = api_client.get(player_url("test"))

    assert response.status_code == 200
    assert response.json()["playerId"] == "player_123"


def test_get_unbound_session_is_forbidden(api_client, store):
    store.create_if_absent("abc123")

    response = api_client.get(player_url("abc123"))

    assert response.status_code == 403
    assert response.json()["detail"] == "Invalid session state"


def test_get_other_player_invalidates_session(api_client, store, play_games):
    api_client.post(player_url("abc123"), "code-xyz", format="json")
    before = store.lookup("abc123")

    response = api_client.get(player_url("other"))

    assert response.status_code == 403
    assert store.lookup("abc123") == before
    assert "other" not in store
    # the old binding is gone, even for its own player
    assert api_client.get(player_url("abc123")).status_code == 403


def test_post_other_player_is_forbidden(api_client, store, play_games):
    bind_session(api_client, "abc123")

    response = api_client.post(player_url("other"), "code-xyz", format="json")

    assert response.status_code == 403
    assert "other" not in store
    assert play_games.calls == []


def test_get_bound_player_missing_from_store(api_client, store):
    bind_session(api_client, "ghost")

    response = api_client.get(player_url("ghost"))

    assert response.status_code == 404


def test_identity_mismatch_is_server_error(api_client, store, play_games):
    play_games.verify = {"player_id": "intruder"}

    response = api_client.post(player_url("abc123"), "code-xyz", format="json")

    assert response.status_code == 500
    assert response.json()["playerId"] == "abc123"
    assert response.json()["displayName"] == ""
    assert store.lookup("abc123").credential is None
    assert PLAYER_ID_KEY not in api_client.session


def test_missing_configuration_is_server_error(api_client, store, missing_secrets):
    response = api_client.post(player_url("abc123"), "code-xyz", format="json")

    assert response.status_code == 500
    assert "ReplaceMe" not in response.content.decode()
    assert store.lookup("abc123").credential is None


def test_post_without_code_and_no_credential(api_client, store):
    response = api_client.post(player_url("abc123"))

    assert response.status_code == 400


def test_post_null_code(api_client, store):
    response = api_client.post(player_url("abc123"), "null", content_type="application/json")

    assert response.status_code == 400


def test_post_without_code_after_exchange_is_a_no_op(api_client, store, play_games):
    api_client.post(player_url("abc123"), "code-xyz", format="json")
    calls = len(play_games.calls)

    response = api_client.post(player_url("abc123"))

    assert response.status_code == 200
    assert response.content == b""
    assert len(play_games.calls) == calls


def test_post_non_string_body(api_client, store):
    response = api_client.post(player_url("abc123"), {"authCode": "code-xyz"}, format="json")

    assert response.status_code == 400


@pytest.mark.parametrize("path", ["/player", "/player/", "/player/abc123/extra"])
def test_malformed_paths(api_client, store, path):
    assert api_client.get(path).status_code == 400
    assert api_client.post(path, "code-xyz", format="json").status_code == 400
    assert len(store) == 0


def test_post_empty_object_with_credential(api_client, store):
    player = store.create_if_absent("abc123")
    player.set_credential(Credential(access_token="a", refresh_token="r"))
    store.save(player)

    response = api_client.post(player_url("abc123"), {}, format="json")

    assert response.status_code == 400
    assert store.lookup("abc123") == player


def test_post_code_without_json_content_type(api_client, store, play_games):
    response = api_client.post(player_url("abc123"), '"code-xyz"', content_type="text/plain")

    assert response.status_code == 415
    assert play_games.calls == []


def test_malformed_profile_settings_is_json_server_error(api_client, store, play_games):
    play_games.player["profileSettings"] = ["x"]

    response = api_client.post(player_url("abc123"), "code-xyz", format="json")

    assert response.status_code == 500
    assert response.json()["playerId"] == "abc123"
    assert store.lookup("abc123").credential is None
