import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from .models import PlayerRecord


class InMemoryPlayerStore:
    """
    Process-local storage of players, keyed by player id.

    Nothing is persisted. Records handed out are copies, so changes only
    reach the store through `save`. Callers doing a read-modify-write hold
    `locked(player_id)` for the whole sequence.
    """

    def __init__(self) -> None:
        self._players: Dict[str, PlayerRecord] = {}
        self._key_locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: str) -> bool:
        return player_id in self._players

    def lookup(self, player_id: str) -> Optional[PlayerRecord]:
        with self._guard:
            player = self._players.get(player_id)
            return player.copy() if player is not None else None

    def create_if_absent(self, player_id: str) -> PlayerRecord:
        with self._guard:
            if player_id not in self._players:
                self._players[player_id] = PlayerRecord(player_id=player_id)
            return self._players[player_id].copy()

    def save(self, player: PlayerRecord) -> None:
        with self._guard:
            self._players[player.player_id] = player.copy()

    @contextmanager
    def locked(self, player_id: str) -> Iterator[None]:
        with self._guard:
            lock = self._key_locks.setdefault(player_id, threading.Lock())
        with lock:
            yield
