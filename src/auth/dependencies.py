from fastapi import Depends, HTTPException, Request, status
from src.database import InMemoryStore, get_db
from src.auth.context import AuthContext
from src.auth.schemas import User
from src.auth.service import IdentityService
from src.auth.session import RequestSessionStore

def get_identity_service(request: Request, db: InMemoryStore = Depends(get_db)) -> IdentityService:
    """Identity service bound to this request's cookie session"""
    return IdentityService(db, RequestSessionStore(request.session))

async def get_auth_context(identity: IdentityService = Depends(get_identity_service)) -> AuthContext:
    """Auth context restored from the session"""
    auth = AuthContext(identity)
    await auth.initialize()
    return auth

def get_current_user(auth: AuthContext = Depends(get_auth_context)) -> User:
    """Get current logged-in user"""
    if auth.user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="You must be logged in."
        )
    return auth.user
