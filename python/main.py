"""
Wedding Gallery API - Main Entry Point

This is the FastAPI application entry point.
Uses core/ for configuration, exceptions, and logging.
"""

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

# Core imports
from core.config import settings, VERSION
from core.base_path import build_url, resolve_base_path
from core.exceptions import AppException
from core.responses import ApiResponse
from core.logging import setup_logging, get_logger

# Setup logging first
setup_logging()
logger = get_logger(__name__)

from infrastructure import get_document_store, get_blob_store
from repositories import GalleriesRepository, PasswordRequestsRepository

# Router imports
from routers import galleries, access, password_requests, config

# ============================================================
# Application Setup
# ============================================================

app = FastAPI(
    title="Wedding Gallery API",
    description="Password protected wedding photo galleries",
    version=VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    redirect_slashes=False,
)

# ============================================================
# CORS Configuration
# ============================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
    max_age=3600,
)

# ============================================================
# Global Exception Handlers
# ============================================================

@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    """
    Handle all custom AppException and subclasses.
    Returns unified ApiResponse format.
    """
    logger.warning(f"AppException: {exc.code} - {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ApiResponse.from_exception(exc).model_dump()
    )

@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """
    Handle unexpected exceptions.
    Logs full traceback and returns generic error.
    """
    logger.error(f"Unhandled exception: {type(exc).__name__}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=ApiResponse.fail(
            message="Internal server error",
            code="INTERNAL_ERROR"
        ).model_dump()
    )

# ============================================================
# Service Initialization (Dependency Injection)
# ============================================================

logger.info(f"Starting Wedding Gallery API v{VERSION}")

document_store = get_document_store()
blob_store = get_blob_store()
logger.info(f"✓ Document store: {settings.document_store}, blob store: {settings.blob_store}")

galleries.set_services(document_store, blob_store)
access.set_services(GalleriesRepository(document_store))
password_requests.set_services(
    GalleriesRepository(document_store),
    PasswordRequestsRepository(document_store),
)
logger.info("✓ Service instances injected into all routers")

logger.warning("Gallery passwords are stored as plain text; treat the document store as sensitive")

# ============================================================
# Root Endpoints
# ============================================================

@app.get("/", response_class=HTMLResponse)
async def root():
    """Landing page with links under the configured base path."""
    return HTMLResponse(
        content=(
            f"<h1>Wedding Gallery API v{VERSION}</h1>"
            f"<p>Mounted at <code>{resolve_base_path()}</code>. "
            f"Admin: <a href='{build_url('/admin')}'>{build_url('/admin')}</a>. "
            f"Visit <a href='/api/docs'>/api/docs</a> for documentation.</p>"
        ),
        status_code=200
    )

@app.get("/api/health")
async def health_check():
    """
    Health check endpoint.
    """
    return ApiResponse.ok({
        "status": "healthy",
        "service": "wedding-gallery",
        "version": VERSION,
        "document_store": settings.document_store,
        "blob_store": settings.blob_store,
    }).model_dump()

# ============================================================
# Router Registration
# ============================================================

app.include_router(galleries.router, prefix="/api/galleries", tags=["galleries"])
app.include_router(access.router, prefix="/api/access", tags=["access"])
app.include_router(password_requests.router, prefix="/api/password-requests", tags=["password-requests"])
app.include_router(config.router, prefix="/api/config", tags=["config"])

logger.info(f"Application startup complete. Running on {settings.server_host}:{settings.server_port}")

# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.debug
    )
