"""
Session-scoped key-value storage for the current identity.

The identity service only needs ``get``/``set``/``clear`` on string values;
where those live is up to the caller.  ``MemorySessionStore`` keeps them
in a dict (tests, scripts), ``RequestSessionStore`` writes through to the
signed cookie session that Starlette's ``SessionMiddleware`` attaches to
each request, which disappears when the browser session ends.
"""

from typing import Dict, MutableMapping, Optional, Protocol


class SessionStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def clear(self, key: str) -> None: ...


class MemorySessionStore:
    """Dict-backed session store"""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def clear(self, key: str) -> None:
        self._data.pop(key, None)


class RequestSessionStore:
    """Session store over ``request.session``"""

    def __init__(self, session: MutableMapping):
        self._session = session

    def get(self, key: str) -> Optional[str]:
        value = self._session.get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self._session[key] = value

    def clear(self, key: str) -> None:
        self._session.pop(key, None)
