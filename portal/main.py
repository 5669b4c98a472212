# /portal/main.py

# --- Core FastAPI Imports ---
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# --- Application-specific Imports ---
from .core.config import CORS_ORIGINS, configure_logging
from .db.database import SessionLocal, create_db_and_tables
from .routers import (
    auth_router,
    admin_students_router,
    admin_content_router,
    admin_submissions_router,
    admin_attendance_router,
    admin_dashboard_router,
    student_router,
)
from .services import auth_service
from .services.database_service import DatabaseService

logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    configure_logging()
    logger.info("Creating database tables...")
    create_db_and_tables()
    db = SessionLocal()
    try:
        auth_service.ensure_bootstrap_admin(DatabaseService(db))
    finally:
        db.close()
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Cohort Portal API",
    description="Assignments, quizzes, projects, grading and attendance for phase-based cohorts.",
    version="1.0.0",
    lifespan=lifespan,
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(auth_router.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(admin_dashboard_router.router, prefix="/api/admin/dashboard", tags=["Admin Dashboard"])
app.include_router(admin_students_router.router, prefix="/api/admin/students", tags=["Admin Students"])
app.include_router(admin_content_router.router, prefix="/api/admin", tags=["Admin Content"])
app.include_router(admin_submissions_router.router, prefix="/api/admin/submissions", tags=["Admin Grading"])
app.include_router(admin_attendance_router.router, prefix="/api/admin/attendance", tags=["Admin Attendance"])
app.include_router(student_router.router, prefix="/api/student", tags=["Student"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Cohort Portal is running!", "version": app.version}
