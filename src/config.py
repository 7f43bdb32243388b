from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "Travely Booking System"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None  # also write logs to this file when set
    
    # Session
    SECRET_KEY: str = "change-me-in-production"
    SESSION_COOKIE: str = "travely_session"
    SESSION_USER_KEY: str = "travely_user"
    SESSION_MAX_AGE: Optional[int] = None  # None keeps the cookie for the browser session
    
    # Simulated backend latency, multiplier on the per-operation delays (0 disables)
    SIMULATED_LATENCY_SCALE: float = 1.0
    
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
