from pydantic import BaseModel, Field
from typing import Optional

class User(BaseModel):
    id: str  # login identifier, lowercase, never changes
    name: str  # display name, editable

class LoginRequest(BaseModel):
    username: str

class RegisterRequest(BaseModel):
    username: str

class ProfileUpdate(BaseModel):
    name: str

class AuthState(BaseModel):
    """Snapshot of the auth context handed to subscribers"""
    current_user: Optional[User] = None
    is_loading: bool = True

class SessionStatus(BaseModel):
    authenticated: bool
    message: str = Field("", description="Human-readable outcome")
