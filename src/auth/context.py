"""
Reactive authentication state for the view layer.

``AuthContext`` wraps an ``IdentityService`` and exposes the current user
together with a loading flag.  The state starts out loading; ``initialize``
restores any identity saved in the session and clears the flag.  The wrapped
operations only touch the state after the underlying call succeeds, so a
failure leaves whatever was displayed before in place.  Subscribers are
called with a fresh ``AuthState`` after every change.
"""

from typing import Callable, List, Optional

from src.auth.schemas import AuthState, User
from src.auth.service import IdentityService
from src.exceptions import UnauthenticatedError

Listener = Callable[[AuthState], None]


class AuthContext:
    def __init__(self, identity: IdentityService):
        self.identity = identity
        self._state = AuthState()
        self._listeners: List[Listener] = []
        self._initialized = False

    @property
    def state(self) -> AuthState:
        return self._state.model_copy()

    @property
    def user(self) -> Optional[User]:
        return self._state.current_user

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a function that removes it"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def initialize(self) -> AuthState:
        """One-time restore of the session identity"""
        if not self._initialized:
            self._initialized = True
            self._set_state(current_user=self.identity.get_current_user(), is_loading=False)
        return self.state

    async def login(self, username: str) -> User:
        user = await self.identity.login(username)
        self._set_state(current_user=user)
        return user

    async def register(self, username: str) -> User:
        user = await self.identity.register(username)
        self._set_state(current_user=user)
        return user

    def logout(self) -> None:
        self.identity.logout()
        self._set_state(current_user=None)

    async def update_profile(self, new_name: str) -> User:
        if self._state.current_user is None:
            raise UnauthenticatedError("You must be logged in to update your profile.")
        user = await self.identity.update_profile(self._state.current_user.id, new_name)
        self._set_state(current_user=user)
        return user

    def _set_state(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)
