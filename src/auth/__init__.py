"""
Authentication Module

Username-only identity for the booking system:

- service.py: IdentityService - user lookup, registration, login, profile updates
- session.py: session-scoped storage of the current identity
- context.py: AuthContext - reactive current-user state for the view layer
- dependencies.py: FastAPI dependencies building the above per request
- router.py: FastAPI endpoints under /auth

Submodules are imported explicitly (``from src.auth import router``); the
store in ``src.database`` depends on ``schemas`` and must be importable
without pulling in the services.
"""
