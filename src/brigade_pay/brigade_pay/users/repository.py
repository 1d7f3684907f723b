from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, username: str, full_name: str, password_hash: str) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError
