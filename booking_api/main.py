"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI

from booking_api.config import get_settings
from booking_api.infrastructure.database import Base, SessionLocal, engine
from booking_api.core.logging import configure_logging
from booking_api.core.middleware import setup_middleware
from booking_api.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
from booking_api.domain.models.user import User
from booking_api.domain.models.apartment import Apartment
from booking_api.domain.models.reservation import Reservation
from booking_api.domain.models.payment import Payment
from booking_api.domain.models.comment import Comment
from booking_api.domain.models.rating import Rating
from booking_api.domain.models.favorite import Favorite
from booking_api.domain.models.activity_log import ActivityLog

from booking_api.application.services.auth_service import ensure_default_admin
from booking_api.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

# Import routers
from booking_api.interfaces.api.auth import router as auth_router
from booking_api.interfaces.api.apartments import router as apartments_router
from booking_api.interfaces.api.reservations import router as reservations_router
from booking_api.interfaces.api.payments import router as payments_router
from booking_api.interfaces.api.ratings import router as ratings_router
from booking_api.interfaces.api.favorites import router as favorites_router
from booking_api.interfaces.api.users import router as users_router
from booking_api.interfaces.api.activity import router as activity_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


def init_db() -> None:
    """Create tables and the bootstrap admin account."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    db = SessionLocal()
    try:
        ensure_default_admin(SQLAlchemyUserRepository(db, User))
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Apartment Booking API", env=settings.ENVIRONMENT)
    init_db()
    yield
    logger.info("Apartment Booking API stopped")


app = FastAPI(
    title="Apartment Booking API",
    description="Users, apartments, reservations, payments, ratings and favorites",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)
register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(apartments_router)
app.include_router(reservations_router)
app.include_router(payments_router)
app.include_router(ratings_router)
app.include_router(favorites_router)
app.include_router(users_router)
app.include_router(activity_router)


@app.get("/")
def root():
    return {
        "name": "Apartment Booking API",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/api/health")
def health():
    return {"status": "OK", "environment": settings.ENVIRONMENT}
