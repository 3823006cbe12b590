# /app/main.py

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from .core.app_logger import get_logger, setup_logging
from .core.config import settings
from .core.exceptions import InternalError, ServiceError, ValidationError

# --- Application-specific Router Imports ---
from .routers import (
    auth_router,
    schools_router,
    students_router,
    subjects_router,
    grades_router,
    observations_router,
    monitors_router,
    dashboard_router,
)

# --- Database Imports for Startup Logic ---
from .db.base import Base
from .db.database import engine

logger = get_logger("main")


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    setup_logging()
    Base.metadata.create_all(bind=engine)
    logger.info("%s %s started", settings.APP_NAME, settings.APP_VERSION)
    yield
    # This code runs ONCE when the application shuts down.
    engine.dispose()

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title=settings.APP_NAME,
    description="Schools, students, staff, subjects, grades and behavioral observations, scoped per school.",
    version=settings.APP_VERSION,
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error Handling ---
# Every failure leaves the API as {"error": ..., "category": ...}.

@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=ValidationError.status_code,
        content=ValidationError(message, field=field or None).to_dict(),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # The cause stays in the server log; the client gets the generic message.
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


# --- API Router Inclusion ---
app.include_router(auth_router.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(schools_router.router, prefix="/api/schools", tags=["Schools"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(subjects_router.router, prefix="/api/subjects", tags=["Subjects"])
app.include_router(grades_router.router, prefix="/api/grades", tags=["Grades"])
app.include_router(observations_router.router, prefix="/api/observations", tags=["Observations"])
app.include_router(monitors_router.router, prefix="/api/monitors", tags=["Monitors"])

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "School Administration API is running!", "version": app.version}
