import logging
import secrets
import uuid
from datetime import datetime, timezone
from typing import Optional

import bcrypt

from mealboard.domain.User import Session, User
from mealboard.domain.errors import AccountExists, AuthFailed
from mealboard.infra.json_store import atomic_write, read_json
from mealboard.infra.paths import USERS_FILE

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class AuthRepository:
    """Email/password accounts in a JSON file plus the one current session of this process."""

    def __init__(self, users_file=USERS_FILE):
        self.users_file = users_file
        self._session: Optional[Session] = None

    def _load_users(self):
        users = read_json(self.users_file, [])
        return users if isinstance(users, list) else []

    def register(self, email: str, password: str) -> User:
        email = _normalize_email(email)
        users = self._load_users()
        if any(u.get("email") == email for u in users):
            raise AccountExists()
        row = {
            "id": str(uuid.uuid4()),
            "email": email,
            "password_hash": hash_password(password),
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        users.append(row)
        atomic_write(self.users_file, users)
        logger.info("Registered user %s", email)
        return User(row["id"], email)

    def sign_in(self, email: str, password: str) -> Session:
        email = _normalize_email(email)
        for row in self._load_users():
            if row.get("email") == email and verify_password(password, row.get("password_hash", "")):
                self._session = Session(secrets.token_urlsafe(32), User(row["id"], email),
                                        datetime.now(timezone.utc))
                logger.info("User %s signed in", email)
                return self._session
        logger.info("Failed sign in for %s", email)
        raise AuthFailed()

    def sign_out(self) -> None:
        if self._session is not None:
            logger.info("User %s signed out", self._session.user.email)
        self._session = None

    def get_current_user(self) -> Optional[User]:
        return self._session.user if self._session else None
