"""
University Discovery - FastAPI Application

Main entry point for the backend API.
Provides endpoints for financial aid prediction, university matching,
financial profiles and side-by-side comparison.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config.settings import settings
from app.infrastructure.exceptions import (
    ConfigurationError,
    DatabaseError,
    NotFoundError,
    UniDiscoveryError,
    ValidationError,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info(f"University Discovery Backend starting in {settings.environment} mode...")

    missing = settings.missing_supabase_keys
    if missing:
        # Production must not start without its database
        if settings.is_production:
            raise ConfigurationError(
                "Missing Supabase configuration",
                missing_keys=missing,
            )
        logger.warning("Supabase is not configured; data endpoints will return 500")

    yield

    logger.info("University Discovery Backend shutting down...")


app = FastAPI(
    title="University Discovery",
    description="Financial aid prediction and university matching for students",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# CORS configuration from Settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle validation errors."""
    return JSONResponse(
        status_code=400,
        content=exc.to_dict(),
    )


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    """Handle not found errors."""
    return JSONResponse(
        status_code=404,
        content=exc.to_dict(),
    )


@app.exception_handler(DatabaseError)
async def database_error_handler(request: Request, exc: DatabaseError):
    """Handle storage failures."""
    logger.error(f"Database error on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=500,
        content=exc.to_dict(),
    )


@app.exception_handler(UniDiscoveryError)
async def general_error_handler(request: Request, exc: UniDiscoveryError):
    """Handle all other application errors."""
    logger.error(f"Unhandled application error on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=500,
        content=exc.to_dict(),
    )


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "uni-discovery"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "University Discovery API",
        "version": "1.0.0",
        "docs": "/docs",
    }


# ============================================================================
# Import and register routers
# ============================================================================

from app.api.routes import compare, financial_aid, financial_profile, matching

app.include_router(financial_aid.router, prefix="/api", tags=["Financial Aid"])
app.include_router(matching.router, prefix="/api", tags=["Matching"])
app.include_router(financial_profile.router, prefix="/api", tags=["Financial Profile"])
app.include_router(compare.router, prefix="/api", tags=["Compare"])
