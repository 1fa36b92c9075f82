import json
import logging
from dataclasses import dataclass
from pathlib import Path

import requests
from django.conf import settings

from ..exceptions import ConfigurationError, UpstreamError
from ..models import Credential

logger = logging.getLogger(__name__)

# Value shipped in the sample client_secret.json.
PLACEHOLDER = "ReplaceMe"


@dataclass(frozen=True)
class ClientSecrets:
    client_id: str
    client_secret: str

    @property
    def application_id(self) -> str:
        # the game's application id is the digits before the first "-"
        idx = self.client_id.find("-")
        return self.client_id[:idx] if idx > 0 else ""


def _validated(client_id, client_secret, source) -> ClientSecrets:
    if not client_id or not client_secret or PLACEHOLDER in (client_id, client_secret):
        raise ConfigurationError(
            f"{source} is not configured correctly! Download your app's "
            "information and place it in client_secret.json"
        )
    return ClientSecrets(client_id=client_id, client_secret=client_secret)


def load_client_secrets() -> ClientSecrets:
    """
    Load the web app's OAuth client id and secret.

    GOOGLE_CLIENT_ID/GOOGLE_CLIENT_SECRET win when both are set, otherwise
    the client_secret.json downloaded from the API console is read. Raises
    ConfigurationError when neither gives real values.
    """
    cfg = settings.PLAY_GAMES
    if cfg.get("CLIENT_ID") and cfg.get("CLIENT_SECRET"):
        return _validated(cfg["CLIENT_ID"], cfg["CLIENT_SECRET"], "GOOGLE_CLIENT_ID/GOOGLE_CLIENT_SECRET")

    secret_file = Path(cfg["CLIENT_SECRET_FILE"])
    if not secret_file.exists():
        raise ConfigurationError(f"Secret file {secret_file.resolve()} does not exist!")

    try:
        data = json.loads(secret_file.read_text())
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Could not read {secret_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{secret_file} is not a client secrets file")
    details = data.get("web") or data.get("installed") or {}
    return _validated(details.get("client_id"), details.get("client_secret"), secret_file.name)


def exchange_code_for_tokens(code: str, secrets: ClientSecrets) -> Credential:
    """
    Redeem a one time server auth code at the token endpoint.

    Not retried: the code is single use, so a second attempt fails anyway.
    """
    cfg = settings.PLAY_GAMES
    data = {
        "grant_type": "authorization_code",
        "code": code,
        "client_id": secrets.client_id,
        "client_secret": secrets.client_secret,
        # server auth codes from the games sdk are issued without a redirect
        "redirect_uri": "",
    }
    resp = requests.post(cfg["TOKEN_ENDPOINT"], data=data, timeout=cfg["TIMEOUT"])
    resp.raise_for_status()
    payload = resp.json()

    if not isinstance(payload, dict) or not payload.get("access_token"):
        raise UpstreamError("Token response did not include an access token")

    try:
        credential = Credential.from_token_response(payload)
    except (TypeError, ValueError) as e:
        raise UpstreamError(f"Bad token response: {e}") from e
    logger.info(f"Exchanged auth code for token, hasRefresh == {credential.refresh_token is not None}")
    return credential
