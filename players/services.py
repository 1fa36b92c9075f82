import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import requests

from .exceptions import ConfigurationError, UpstreamError
from .models import PlayerRecord
from .store import InMemoryPlayerStore
from .utils.games_api import PlayGamesAPI
from .utils.oauth import exchange_code_for_tokens, load_client_secrets

logger = logging.getLogger(__name__)


class ExchangeOutcome(Enum):
    SUCCESS = "success"
    UNCHANGED = "unchanged"
    MISSING_AUTH_CODE = "missing_auth_code"
    CONFIG_ERROR = "config_error"
    EXCHANGE_FAILED = "exchange_failed"
    IDENTITY_MISMATCH = "identity_mismatch"


@dataclass(frozen=True)
class ExchangeResult:
    outcome: ExchangeOutcome
    player: PlayerRecord

    @property
    def ok(self) -> bool:
        return self.outcome in (ExchangeOutcome.SUCCESS, ExchangeOutcome.UNCHANGED)


class PlayerExchangeService:
    """
    Turns a client's server auth code into a verified, stored player.

    The exchange runs on a copy of the stored record; the copy is saved only
    when the token exchange, verify and players.get all succeed, so a failed
    attempt leaves the store as it was.
    """

    def __init__(self, store: InMemoryPlayerStore):
        self.store = store

    def submit_auth_code(self, player_id: str, auth_code: Optional[str]) -> ExchangeResult:
        with self.store.locked(player_id):
            player = self.store.create_if_absent(player_id)

            if auth_code is None:
                if player.credential is None:
                    return ExchangeResult(ExchangeOutcome.MISSING_AUTH_CODE, player)
                return ExchangeResult(ExchangeOutcome.UNCHANGED, player)

            return self.exchange_auth_code(auth_code, player)

    def exchange_auth_code(self, auth_code: str, player: PlayerRecord) -> ExchangeResult:
        try:
            secrets = load_client_secrets()
        except ConfigurationError as e:
            logger.error(f"Client secrets unusable: {e}")
            return ExchangeResult(ExchangeOutcome.CONFIG_ERROR, player)

        candidate = player.copy()
        try:
            candidate.set_credential(exchange_code_for_tokens(auth_code, secrets))

            api = PlayGamesAPI(candidate, secrets.application_id)
            if not api.verify_player() or not api.update_player_info():
                logger.warning(f"Identity check failed for player {player.player_id}")
                return ExchangeResult(ExchangeOutcome.IDENTITY_MISMATCH, player)
        except (requests.RequestException, UpstreamError):
            logger.exception(f"Auth code exchange failed for player {player.player_id}")
            return ExchangeResult(ExchangeOutcome.EXCHANGE_FAILED, player)

        self.store.save(candidate)
        logger.info(f"Player {candidate.player_id} verified and saved")
        return ExchangeResult(ExchangeOutcome.SUCCESS, candidate)
