from typing import Optional

# Session attribute holding the player id bound to this session.
PLAYER_ID_KEY = "p"


def bound_player_id(session) -> Optional[str]:
    return session.get(PLAYER_ID_KEY)


def bind_player(session, player_id: str) -> None:
    """
    Bind the session to `player_id`. A fresh binding gets a new session key,
    same as django.contrib.auth.login does.
    """
    if bound_player_id(session) is None:
        session.cycle_key()
    session[PLAYER_ID_KEY] = player_id


def invalidate(session) -> None:
    # drops the data and the key; the client ends up with an unbound session
    session.flush()
