import logging
import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from jobboard.core.config import settings
from jobboard.core.database import init_db
from jobboard.core.errors import register_exception_handlers
from jobboard.core.logging_config import setup_logging
from jobboard.api.endpoints import applications, candidates, employers, health, jobs, resumes

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("jobboard.access")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS, service=settings.PROJECT_NAME)
    logger.info(f"Starting up {settings.PROJECT_NAME}...")
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Job board backend: employers post jobs, candidates upload resumes and apply",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """One log record per request with method, path, status code and duration"""
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    access_logger.info(
        f"{request.method} {request.url.path} -> {response.status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


# Include routers
app.include_router(health.router)
app.include_router(employers.router, prefix=settings.API_V1_STR)
app.include_router(jobs.router, prefix=settings.API_V1_STR)
app.include_router(candidates.router, prefix=settings.API_V1_STR)
app.include_router(resumes.router, prefix=settings.API_V1_STR)
app.include_router(applications.router, prefix=settings.API_V1_STR)


@app.get("/")
async def root():
    """Root endpoint - service banner with an index of the API"""
    api = settings.API_V1_STR
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "healthy",
        "endpoints": {
            "employers": {
                f"POST {api}/employers/": "Create new employer",
                f"GET {api}/employers/": "Get all employers",
                f"GET {api}/employers/search?companyName=": "Search employers by company name",
                f"GET {api}/employers/{{id}}": "Get specific employer",
            },
            "jobs": {
                f"POST {api}/jobs/": "Create new job posting",
                f"GET {api}/jobs/": "Get all job postings",
                f"GET {api}/jobs/search": "Search jobs by title/location/salary",
                f"GET {api}/jobs/employer/{{employer_id}}": "Get jobs posted by an employer",
                f"GET {api}/jobs/{{id}}": "Get specific job",
            },
            "candidates": {
                f"POST {api}/candidates/": "Create new candidate",
                f"GET {api}/candidates/": "Get all candidates",
                f"GET {api}/candidates/{{id}}": "Get specific candidate",
            },
            "resumes": {
                f"POST {api}/resumes/": "Upload resume information",
                f"GET {api}/resumes/": "Get all resumes",
                f"GET {api}/resumes/candidate/{{candidate_id}}": "Get resumes for candidate",
                f"GET {api}/resumes/{{id}}": "Get specific resume",
            },
            "applications": {
                f"POST {api}/apply": "Submit job application",
                f"GET {api}/applications": "Get all applications",
                f"GET {api}/applications/{{candidate_id}}": "Get candidate applications",
                f"PUT {api}/applications/{{id}}": "Update application status",
                f"GET {api}/applications/stats": "Application counts per status",
            },
        },
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
