from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import USERS_KEY
from ..storage.kv_store import KeyValueStore
from .model import User


class KeyValueUserRepository:
    """Users kept as one JSON list under the 'users' key."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _rows(self) -> list[dict]:
        return list(self._store.get(USERS_KEY, []) or [])

    @staticmethod
    def _map_row(row: dict) -> User:
        return User(
            username=str(row["username"]),
            full_name=str(row.get("full_name") or ""),
            password_hash=str(row.get("password_hash") or ""),
        )

    def list_all(self) -> Sequence[User]:
        return [self._map_row(r) for r in self._rows()]

    def get_by_username(self, username: str) -> Optional[User]:
        for row in self._rows():
            if row.get("username") == username:
                return self._map_row(row)
        return None

    def create_user(self, *, username: str, full_name: str, password_hash: str) -> None:
        rows = self._rows()
        rows.append({"username": username, "full_name": full_name, "password_hash": password_hash})
        self._store.set(USERS_KEY, rows)
