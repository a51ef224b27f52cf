"""Roster persisted as a comma-separated value in a dotenv file."""
from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import List

from dotenv import dotenv_values, set_key

from domain.entities import PlayerIdentity
from domain.errors import InvalidRiotIdError, PersistenceError
from domain.interfaces import IRosterStore

logger = logging.getLogger(__name__)


class EnvRosterStore(IRosterStore):
    """
    Stores the tracked players as ``KEY='Name#Tag,Name#Tag'`` in a dotenv file.

    - Other keys, comments and blank lines are left untouched (dotenv's set_key).
    - The file is created on first upsert.
    - When the file has no such key, the process environment seeds the list,
      so a roster given as an env var keeps working until the first ``!add``.
    - load/upsert hold one lock, making read-modify-write atomic within a process.
      Separate processes sharing the file are not coordinated.
    """

    def __init__(self, path: Path, key: str = "LOL_PLAYERS", *, env_fallback: bool = True) -> None:
        self.path = Path(path)
        self.key = key
        self.env_fallback = env_fallback
        self._lock = threading.Lock()

    def load(self) -> List[PlayerIdentity]:
        with self._lock:
            return self._load_unlocked()

    def upsert(self, identity: PlayerIdentity) -> bool:
        with self._lock:
            players = self._load_unlocked()
            if identity in players:
                logger.info(f"{identity} already in roster {self.key}")
                return False
            players.append(identity)
            value = ",".join(p.riot_id for p in players)
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch(exist_ok=True)
                set_key(str(self.path), self.key, value, quote_mode="always")
            except (OSError, UnicodeDecodeError) as e:
                raise PersistenceError(f"could not write roster to {self.path}: {e}") from e
            logger.info(f"Added {identity} to {self.key} ({len(players)} players)")
            return True

    def _load_unlocked(self) -> List[PlayerIdentity]:
        raw = self._read_raw()
        players: List[PlayerIdentity] = []
        for item in raw.split(","):
            item = item.strip()
            if not item:
                continue
            try:
                identity = PlayerIdentity.parse(item)
            except InvalidRiotIdError:
                logger.warning(f"Skipping invalid Riot ID in {self.key}: {item!r}")
                continue
            if identity not in players:
                players.append(identity)
        return players

    def _read_raw(self) -> str:
        try:
            values = dotenv_values(self.path, encoding="utf-8") if self.path.exists() else {}
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"could not read roster from {self.path}: {e}") from e
        value = values.get(self.key)
        if value is None and self.env_fallback:
            value = os.environ.get(self.key)
        return value or ""
