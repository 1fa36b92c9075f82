import logging

import requests
from django.conf import settings

from ..exceptions import UpstreamError
from ..models import PlayerRecord

logger = logging.getLogger(__name__)


class PlayGamesAPI:
    """
    Thin wrapper over the Play Games Web API calls the server makes for a
    player, authorized with the player's freshly exchanged access token.

    Both calls return False on an identity mismatch and let `requests`
    errors propagate.
    """

    def __init__(self, player: PlayerRecord, application_id: str):
        if player.credential is None:
            raise ValueError("player has no credential")
        self.player = player
        self.application_id = application_id

    def _get(self, path: str) -> dict:
        cfg = settings.PLAY_GAMES
        resp = requests.get(
            f"{cfg['API_BASE']}{path}",
            headers={"Authorization": f"Bearer {self.player.credential.access_token}"},
            timeout=cfg["TIMEOUT"],
        )
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise UpstreamError(f"Unexpected response from {path}")
        return data

    def verify_player(self) -> bool:
        """
        Games.applications.verify: checks the token is good for this game and
        that it belongs to the player id (or alt id) the client claimed.
        """
        data = self._get(f"/applications/{self.application_id}/verify")
        upstream_id = data.get("player_id")
        upstream_alt_id = data.get("alternate_player_id")

        player = self.player
        if player.player_id == upstream_id or (
            player.alt_player_id and player.alt_player_id == upstream_alt_id
        ):
            player.set_alt_player_id(upstream_alt_id)
            return True

        logger.warning(f"Verify returned player {upstream_id}, expected {player.player_id}")
        return False

    def update_player_info(self) -> bool:
        """
        Games.players.get: copies profile fields onto the player and handles
        the games-lite player id migration.
        """
        data = self._get(f"/players/{self.player.player_id}")
        upstream_id = data.get("playerId")
        original_id = data.get("originalPlayerId")

        player = self.player
        if player.player_id != upstream_id:
            # migrated: we must be holding the id it was migrated from
            if player.player_id != original_id:
                logger.warning(
                    f"Players.get returned {upstream_id} (original {original_id}) for {player.player_id}"
                )
                return False
            player.set_alt_player_id(upstream_id)
        elif original_id and original_id != player.alt_player_id:
            player.set_alt_player_id(original_id)

        profile_settings = data.get("profileSettings") or {}
        if not isinstance(profile_settings, dict):
            raise UpstreamError("Unexpected profileSettings in players.get response")

        player.display_name = data.get("displayName") or ""
        player.title = data.get("title") or ""
        player.visible_profile = bool(profile_settings.get("profileVisible", False))
        return True
