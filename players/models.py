from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Optional


@dataclass(frozen=True)
class Credential:
    """
    OAuth tokens granting this server access to the Games API for one player.
    Server side only, never serialized to the client.
    """
    access_token: str
    refresh_token: Optional[str] = None
    expires_at: Optional[datetime] = None

    @classmethod
    def from_token_response(cls, payload: dict, now: datetime | None = None) -> "Credential":
        expires_at = None
        expires_in = payload.get("expires_in")
        if expires_in is not None:
            now = now or datetime.now(timezone.utc)
            expires_at = now + timedelta(seconds=int(expires_in))
        return cls(
            access_token=payload["access_token"],
            refresh_token=payload.get("refresh_token") or None,
            expires_at=expires_at,
        )


@dataclass
class PlayerRecord:
    """
    Server side representation of a player, keyed by the Play Games player id.

    Profile fields stay empty until an auth code exchange succeeds.
    `alt_player_id` is only used while migrating to the games-lite namespace.
    """
    player_id: str
    alt_player_id: str = ""
    display_name: str = ""
    title: str = ""
    visible_profile: bool = False
    credential: Optional[Credential] = None

    @property
    def need_refresh_token(self) -> bool:
        # the client should force re-consent next sign in when this is set
        return self.credential is None or self.credential.refresh_token is None

    def set_credential(self, credential: Credential) -> None:
        self.credential = credential

    def set_alt_player_id(self, alt_player_id: str | None) -> None:
        self.alt_player_id = alt_player_id or ""

    def copy(self) -> "PlayerRecord":
        return replace(self)
