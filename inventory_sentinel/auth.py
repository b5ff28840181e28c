import json
import logging
import os
import secrets
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple

import bcrypt
from dotenv import load_dotenv
from pydantic import ValidationError

from .inventory_models import SessionUser, User
from .store import EntityStore

load_dotenv()

SESSION_FILE = os.getenv("SESSION_FILE", ".inventory_session.json")
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))
SESSION_KEY = "currentUser"
SESSION_COOKIE = "inventory_session"
LOGIN_ROUTE = "/login"
HOME_ROUTE = "/"

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds or BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # not a bcrypt hash
        return False


class SessionStorage:
    """
    Durable key/value text storage backed by a JSON file, the server-side stand-in for the
    browser's localStorage. Values are strings, exactly like localStorage.
    """

    def __init__(self, path=SESSION_FILE):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError):
            logger.warning("session storage unreadable, starting empty", extra={"path": str(self.path)})
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


class AuthState(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class AuthGate:
    """
    Login gate with one session per client.

    Credentials are checked against the User store (bcrypt hashes). A successful login hands out
    an opaque token; the logged-in user is persisted as ``{id, email, name, role}`` JSON under
    ``currentUser:<token>`` so it survives a restart. There is no expiry and no refresh.
    """

    def __init__(self, users: EntityStore[User], storage: SessionStorage):
        self.users = users
        self.storage = storage

    @staticmethod
    def _key(token: str) -> str:
        return f"{SESSION_KEY}:{token}"

    def restore(self, token: Optional[str]) -> Optional[SessionUser]:
        """Session for ``token``; an unparseable blob is discarded."""
        if not token:
            return None
        raw = self.storage.get_item(self._key(token))
        if not raw:
            return None
        try:
            return SessionUser.model_validate_json(raw)
        except ValidationError:
            logger.error("failed to parse persisted session, discarding it")
            self.storage.remove_item(self._key(token))
            return None

    def state(self, token: Optional[str]) -> AuthState:
        return AuthState.AUTHENTICATED if self.restore(token) else AuthState.ANONYMOUS

    def login(self, email: str, password: str) -> Optional[Tuple[str, SessionUser]]:
        email = (email or "").strip().lower()
        user = self.users.find(lambda u: u.email.lower() == email)
        if not user or not verify_password(password, user.password_hash):
            logger.info("login rejected", extra={"email": email})
            return None
        session = SessionUser(id=user.id, email=user.email, name=user.name, role=user.role)
        token = secrets.token_urlsafe(32)
        self.storage.set_item(self._key(token), session.model_dump_json())
        logger.info("login ok", extra={"entity": user.id})
        return token, session

    def logout(self, token: Optional[str]) -> None:
        if token:
            self.storage.remove_item(self._key(token))
        logger.info("logout")

    def guard(self, path: str, token: Optional[str] = None) -> Optional[str]:
        """Where a navigation to ``path`` must be redirected, or None to let it through."""
        signed_in = self.restore(token) is not None
        if not signed_in and path != LOGIN_ROUTE:
            return LOGIN_ROUTE
        if signed_in and path == LOGIN_ROUTE:
            return HOME_ROUTE
        return None
