"""Per-visitor cart sessions"""

import re
import uuid
import logging
from datetime import datetime
from typing import Optional
from dataclasses import dataclass

from ..cart import CartStore, CartStorage, MemoryCartStorage, JsonFileCartStorage
from .config import Settings

logger = logging.getLogger(__name__)

SESSION_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def is_valid_session_id(session_id: str) -> bool:
    """Session ids double as storage directory names, so keep them plain"""
    return bool(SESSION_ID_PATTERN.match(session_id))


@dataclass
class CartSession:
    """One browser tab's cart"""
    session_id: str
    created_at: datetime
    updated_at: datetime
    cart: CartStore

    def touch(self) -> None:
        self.updated_at = datetime.utcnow()


class CartSessionManager:
    """
    Owns one CartStore per session.

    Every session gets its own persistence scope holding a single entry
    named ``settings.cart_storage_key``. A session that is not in memory
    but has a persisted snapshot is rebuilt from it.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.sessions: dict[str, CartSession] = {}
        self._memory_scopes: dict[str, dict[str, str]] = {}

    def _create_storage(self, session_id: str) -> CartStorage:
        key = self.settings.cart_storage_key
        if self.settings.cart_storage_backend == "file":
            return JsonFileCartStorage(self.settings.cart_storage_dir / session_id, key=key)
        backend = self._memory_scopes.setdefault(session_id, {})
        return MemoryCartStorage(key=key, backend=backend)

    def create_session(self, session_id: Optional[str] = None) -> CartSession:
        """Create a session, restoring its cart from storage if any was saved"""
        session_id = session_id or uuid.uuid4().hex
        if not is_valid_session_id(session_id):
            raise ValueError(f"Invalid session id: {session_id!r}")

        now = datetime.utcnow()
        session = CartSession(
            session_id=session_id,
            created_at=now,
            updated_at=now,
            cart=CartStore(
                storage=self._create_storage(session_id),
                merge_policy=self.settings.cart_merge_policy,
            ),
        )
        self.sessions[session_id] = session
        logger.debug(f"Cart session {session_id} opened with {session.cart.get_total_items()} item(s)")
        return session

    def get_session(self, session_id: str) -> Optional[CartSession]:
        """Get session by ID"""
        return self.sessions.get(session_id)

    def get_or_create_session(self, session_id: Optional[str] = None) -> CartSession:
        """Get existing session or create new one"""
        if session_id and session_id in self.sessions:
            session = self.sessions[session_id]
            session.touch()
            return session
        return self.create_session(session_id)

    def drop_session(self, session_id: str) -> bool:
        """Forget the in-memory store; its persisted snapshot is kept"""
        if session_id in self.sessions:
            del self.sessions[session_id]
            return True
        return False

    def cleanup_old_sessions(self, max_age_hours: Optional[int] = None) -> int:
        """Drop sessions idle for longer than max_age_hours"""
        if max_age_hours is None:
            max_age_hours = self.settings.cart_session_max_age_hours
        now = datetime.utcnow()
        old_sessions = [
            sid for sid, session in self.sessions.items()
            if (now - session.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for sid in old_sessions:
            del self.sessions[sid]
        if old_sessions:
            logger.info(f"Dropped {len(old_sessions)} idle cart session(s)")
        return len(old_sessions)
