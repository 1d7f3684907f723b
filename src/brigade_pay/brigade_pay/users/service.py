from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import DEFAULT_MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    username: str
    full_name: str


class AuthService:
    """Use case: register and authenticate application users."""

    def __init__(self, users: UserRepository, *, min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH):
        self._users = users
        self._min_password_length = int(min_password_length)

    def register(self, *, username: str, password: str, full_name: str) -> SessionUser:
        username = require_non_empty(username, "Nazwa użytkownika")
        full_name = require_non_empty(full_name, "Imię i nazwisko")
        require_min_length(password, "Hasło", self._min_password_length)

        if self._users.get_by_username(username):
            raise ValidationError("Nazwa użytkownika jest już zajęta")

        self._users.create_user(
            username=username,
            full_name=full_name,
            password_hash=generate_password_hash(password),
        )
        logger.info("user registered username=%s", username)
        return SessionUser(username=username, full_name=full_name)

    def authenticate(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username((username or "").strip())

        try:
            ok = bool(user) and check_password_hash(user.password_hash, password or "")
        except ValueError:
            # corrupted or placeholder hash values
            ok = False

        if not ok:
            logger.warning("failed login username=%s", username)
            raise AuthenticationError("Nieprawidłowa nazwa użytkownika lub hasło")

        return SessionUser(username=user.username, full_name=user.full_name)
