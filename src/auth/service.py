import json
import logging
from typing import Optional

from src.auth.schemas import User
from src.auth.session import SessionStore
from src.config import settings
from src.database import InMemoryStore
from src.exceptions import (
    ConflictError, InputValidationError, InvalidCredentialsError, NotFoundError
)

logger = logging.getLogger(__name__)

class IdentityService:
    """Service for user records and the session-scoped current identity"""

    def __init__(self, db: InMemoryStore, session: SessionStore, session_key: Optional[str] = None):
        self.db = db
        self.session = session
        self.session_key = session_key or settings.SESSION_USER_KEY

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """Get user by login identifier (case-insensitive)"""
        return self.db.find_user(user_id.lower())

    async def login(self, username: str) -> User:
        """Log in an existing user by username"""
        await self.db.simulate_delay(500)

        user = self.get_user_by_id(username)
        if not user:
            raise InvalidCredentialsError("Invalid username.")

        self._remember(user)
        logger.info("User %s logged in", user.id)
        return user.model_copy()

    async def register(self, username: str) -> User:
        """Create a user and log them in"""
        await self.db.simulate_delay(500)

        if not username:
            raise InputValidationError("Username cannot be empty.")
        if self.get_user_by_id(username):
            raise ConflictError("Username already exists.")

        user = User(id=username.lower(), name=username)
        self.db.users.append(user)

        # Registration implies login
        self._remember(user)
        logger.info("Registered user %s", user.id)
        return user.model_copy()

    async def update_profile(self, user_id: str, new_name: str) -> User:
        """Change a user's display name"""
        await self.db.simulate_delay(600)

        if not new_name.strip():
            raise InputValidationError("Name cannot be empty.")

        user = self.db.find_user(user_id)
        if not user:
            raise NotFoundError("User not found.")

        user.name = new_name
        self._remember(user)
        return user.model_copy()

    def logout(self) -> None:
        self.session.clear(self.session_key)

    def get_current_user(self) -> Optional[User]:
        """Restore the identity saved in the session, if any"""
        payload = self.session.get(self.session_key)
        if not payload:
            return None

        try:
            return User.model_validate_json(payload)
        except ValueError as e:
            # pydantic.ValidationError is a ValueError
            logger.warning("Failed to parse user from session: %s", e)
            return None

    def _remember(self, user: User) -> None:
        self.session.set(self.session_key, json.dumps({"id": user.id, "name": user.name}))
