"""
FastAPI application entry point for the FoodShare API.

This module initializes the FastAPI app with middleware, CORS, logging,
exception handlers and registers all API routers.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.openapi.utils import get_openapi

from slowapi.errors import RateLimitExceeded

from foodshare import __version__
from foodshare.config import settings
from foodshare.core.errors import FoodShareError
from foodshare.core.rate_limit import limiter
from foodshare.database import init_db
from foodshare.routers import (
    users,
    categories,
    food_items,
    availability,
    claims,
    expiration_alerts,
    friend_groups,
    group_members,
    social_posts,
    setup,
)

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="FoodShare API",
    description="Household food inventory, sharing and expiration alerts",
    version=__version__,
    lifespan=lifespan,
)
app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def custom_rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": "Rate limit exceeded. Please try again later."},
    )


@app.exception_handler(FoodShareError)
async def domain_error_handler(request: Request, exc: FoodShareError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # One generic message; the field errors only go to the log.
    logger.info(f"Validation failed on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": "Validation failed"},
    )


# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add GZip compression
app.add_middleware(GZipMiddleware, minimum_size=1000)

# Register routers
api = settings.API_PREFIX
app.include_router(users.router, prefix=f"{api}/users", tags=["users"])
app.include_router(categories.router, prefix=f"{api}/categories", tags=["categories"])
app.include_router(food_items.router, prefix=f"{api}/fooditems", tags=["food items"])
app.include_router(availability.router, prefix=f"{api}/availability", tags=["availability"])
app.include_router(claims.router, prefix=f"{api}/claims", tags=["claims"])
app.include_router(
    expiration_alerts.router, prefix=f"{api}/expirationalerts", tags=["expiration alerts"]
)
app.include_router(friend_groups.router, prefix=f"{api}/friendgroups", tags=["friend groups"])
app.include_router(group_members.router, prefix=f"{api}/groupmembers", tags=["group members"])
app.include_router(social_posts.router, prefix=f"{api}/socialposts", tags=["social posts"])
app.include_router(setup.router, prefix=f"{api}/create", tags=["setup"])


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="FoodShare API",
        version=__version__,
        description="Household food inventory, sharing and expiration alerts",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal Server Error", "details": str(exc)},
    )


@app.get("/")
async def root():
    """Root endpoint for health check."""
    return {"message": "FoodShare API", "status": "running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "foodshare.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
