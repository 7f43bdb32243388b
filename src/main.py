from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware
from src.config import settings
from src.database import InMemoryStore
from src.logging_config import setup_logging
from src.auth import router as auth_router
from src.travel import router as travel_router
from src.bookings import router as bookings_router

def create_app(db: Optional[InMemoryStore] = None) -> FastAPI:
    """Build the application around ``db`` (a freshly seeded store by default)"""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Travely travel booking API",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.db = db or InMemoryStore(latency_scale=settings.SIMULATED_LATENCY_SCALE)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Current identity lives in a signed cookie for the browser session
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SECRET_KEY,
        session_cookie=settings.SESSION_COOKIE,
        max_age=settings.SESSION_MAX_AGE,
    )

    # Include routers
    app.include_router(
        auth_router.router,
        prefix=f"{settings.API_V1_STR}/auth",
        tags=["Authentication"]
    )

    app.include_router(
        travel_router.router,
        prefix=f"{settings.API_V1_STR}/travel-options",
        tags=["Travel Options"]
    )

    app.include_router(
        bookings_router.router,
        prefix=f"{settings.API_V1_STR}/bookings",
        tags=["Bookings"]
    )

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": settings.PROJECT_NAME,
            "version": "1.0.0",
            "docs": "/docs"
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
