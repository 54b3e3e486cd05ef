# app/main.py
"""
FastAPI application entry point.
Includes CORS, request timing, domain/global error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from app.routers import health, materials, personnel, profiles, vehicles
from app.database import create_tables
from app.config import settings
from app.exceptions import (
    AuthenticationRequired,
    Conflict,
    FleetError,
    MaterialUpdateFailed,
    NotFound,
    StoreFailure,
    ValidationFailed,
)
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Fleet Verification API",
    description="Vehicles, materials and personnel for emergency services, with vehicle verification passes.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Domain Exception Handlers ────────────────────────────────────────────────
# Most specific first; anything else under FleetError is a bad request.
ERROR_STATUS = [
    (AuthenticationRequired, status.HTTP_401_UNAUTHORIZED),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (Conflict, status.HTTP_409_CONFLICT),
    (StoreFailure, status.HTTP_502_BAD_GATEWAY),
    (MaterialUpdateFailed, status.HTTP_502_BAD_GATEWAY),
    (ValidationFailed, status.HTTP_502_BAD_GATEWAY),
]


def status_for(exc: FleetError) -> int:
    for exc_type, code in ERROR_STATUS:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_400_BAD_REQUEST


@app.exception_handler(FleetError)
async def fleet_error_handler(request: Request, exc: FleetError):
    code = status_for(exc)
    logger.warning(f"{request.method} {request.url.path} → {code}: {exc}")
    return JSONResponse(status_code=code, content={"detail": str(exc)})


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(vehicles.router,  prefix="/api/v1", tags=["🚒 Vehicles"])
app.include_router(materials.router, prefix="/api/v1", tags=["🧰 Materials"])
app.include_router(personnel.router, prefix="/api/v1", tags=["👩‍🚒 Personnel"])
app.include_router(profiles.router,  prefix="/api/v1", tags=["👤 Profile"])
app.include_router(health.router,    prefix="/api/v1", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Fleet backend starting up...")
    create_tables()
    logger.info("✅ Database tables ready")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Fleet backend shutting down...")
