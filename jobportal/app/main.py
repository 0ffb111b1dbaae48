"""Main FastAPI application module."""
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from jobportal import __version__
from jobportal.core.config import get_settings
from jobportal.core.logging import setup_logging

# Import routers
from .routers import auth, jobs, scheduling, interview, feedback, functions
from .dependencies import get_current_session, get_session_registry

logger = setup_logging('api')
settings = get_settings()

app = FastAPI(
    title="Job Portal API",
    description="""
    REST API for the Job Portal that provides endpoints for:

    * Job listing, search and plain-text export
    * Job details and application submission with resume upload
    * Interview scheduling for applications at the interview stage
    * Scripted AI interview sessions with a 30 minute countdown
    * Interview feedback and downloadable feedback reports

    ## Authentication

    Every endpoint except `/api/auth/*`, `/api/functions/*` and
    `/api/health` requires a user access token from the hosted auth service.
    Include it in the Authorization header:
    ```
    Authorization: Bearer <your_token>
    ```
    """,
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# The entry path is open; every other page needs a session
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(
    jobs.router,
    prefix="/api/jobs",
    tags=["jobs"],
    dependencies=[Depends(get_current_session)]
)
app.include_router(
    scheduling.router,
    prefix="/api/schedule-interview",
    tags=["scheduling"],
    dependencies=[Depends(get_current_session)]
)
app.include_router(
    interview.router,
    prefix="/api/interview",
    tags=["interview"],
    dependencies=[Depends(get_current_session)]
)
app.include_router(
    feedback.router,
    prefix="/api/interview",
    tags=["feedback"],
    dependencies=[Depends(get_current_session)]
)
app.include_router(functions.router, prefix="/api/functions", tags=["functions"])


def custom_openapi():
    """Generate custom OpenAPI schema with the bearer security scheme."""
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "bearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
    }
    openapi_schema["security"] = [{"bearerAuth": []}]

    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi

@app.on_event("startup")
async def startup_event():
    """Log the backend the API talks to."""
    logger.info(
        f"Job Portal API {__version__} using backend {settings.backend_url} "
        f"(job source: {settings.job_source})"
    )

@app.on_event("shutdown")
async def shutdown_event():
    """Release interview sessions still open."""
    get_session_registry().close_all()

@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "Job Portal API",
        "version": __version__
    }
