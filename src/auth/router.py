from fastapi import APIRouter, Depends, HTTPException, status
from src.auth.context import AuthContext
from src.auth.dependencies import get_auth_context, get_current_user
from src.auth.schemas import User, LoginRequest, RegisterRequest, ProfileUpdate, SessionStatus
from src.exceptions import TravelyError

router = APIRouter()

@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
async def register_user(request: RegisterRequest, auth: AuthContext = Depends(get_auth_context)):
    """Register a new user and start their session"""
    try:
        return await auth.register(request.username)
    except TravelyError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

@router.post("/login", response_model=User)
async def login(request: LoginRequest, auth: AuthContext = Depends(get_auth_context)):
    """Log in by username"""
    if not request.username:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please enter a username."
        )
    try:
        return await auth.login(request.username)
    except TravelyError as e:
        raise HTTPException(status_code=e.status_code, detail=f"Login failed: {e.message}")

@router.post("/logout", response_model=SessionStatus)
def logout(auth: AuthContext = Depends(get_auth_context)):
    """End the current session"""
    auth.logout()
    return SessionStatus(authenticated=False, message="Logged out.")

@router.get("/me", response_model=User)
def read_users_me(current_user: User = Depends(get_current_user)):
    """Get current user profile"""
    return current_user

@router.put("/me", response_model=User)
async def update_user_profile(update: ProfileUpdate, auth: AuthContext = Depends(get_auth_context)):
    """Update current user's display name"""
    try:
        return await auth.update_profile(update.name)
    except TravelyError as e:
        raise HTTPException(status_code=e.status_code, detail=f"Update failed: {e.message}")
