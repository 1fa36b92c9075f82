import json

import requests


def fake_response(payload, status_code=200):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = json.dumps(payload).encode()
    resp.headers["Content-Type"] = "application/json"
    return resp


class FakePlayGames:
    """
    Stands in for the token endpoint and the Games API. Tests edit the
    payloads before making the request.
    """

    def __init__(self, player_id="abc123"):
        self.token = {"access_token": "ya29.access", "expires_in": 3600}
        self.token_status = 200
        self.token_error = None
        self.verify = {"kind": "games#applicationVerifyResponse", "player_id": player_id}
        self.player = {
            "kind": "games#player",
            "playerId": player_id,
            "displayName": "Abc Player",
            "title": "Rookie",
            "profileSettings": {"profileVisible": True},
        }
        self.calls = []

    def post(self, url, data=None, timeout=None, **kwargs):
        self.calls.append(("POST", url, data))
        if self.token_error is not None:
            raise self.token_error
        return fake_response(self.token, self.token_status)

    def get(self, url, headers=None, timeout=None, **kwargs):
        self.calls.append(("GET", url, headers))
        if url.endswith("/verify"):
            return fake_response(self.verify)
        return fake_response(self.player)
