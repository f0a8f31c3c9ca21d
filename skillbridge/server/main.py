"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillbridge.core.database import init_db
from skillbridge.core.logging_config import get_logger, setup_logging
from skillbridge.core.monitoring import initialize_logfire

from .api.v1 import admin, auth, bookings, categories, errors, health, reviews, tutors, users
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestTimingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup. Schema changes in production go through
    Alembic.
    """
    logger.info(f"Starting up {constant.PROJECT_NAME} API...")
    try:
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)
        raise

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME} API...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    SkillBridge API

    Backend for the SkillBridge tutoring marketplace: accounts and bearer-token
    authentication, tutor search and profiles, session bookings, reviews,
    subject categories and the admin console.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

initialize_logfire(app)
setup_exception_handlers(app)

app.add_middleware(RequestTimingMiddleware)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)


app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix=f"{constant.API_PREFIX}/auth")
app.include_router(tutors.router, prefix=f"{constant.API_PREFIX}/tutors")
app.include_router(bookings.router, prefix=f"{constant.API_PREFIX}/bookings")
app.include_router(reviews.router, prefix=f"{constant.API_PREFIX}/reviews")
app.include_router(categories.router, prefix=f"{constant.API_PREFIX}/categories")
app.include_router(admin.router, prefix=f"{constant.API_PREFIX}/admin")
app.include_router(users.router, prefix=f"{constant.API_PREFIX}/users")
app.include_router(errors.router, prefix=f"{constant.API_PREFIX}/errors")


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "skillbridge.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
