"""
Main application entry point - FastAPI app instance and configuration.
Run with: uvicorn app.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.routers import generate

# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
# Visit http://localhost:8000/docs to try POST /generate with a file upload
app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ---------------------------------------------------------------------------
# CORS MIDDLEWARE
# ---------------------------------------------------------------------------
# The input area front end is served from a different origin than the API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
# generate.router: POST /generate
app.include_router(generate.router)


# ---------------------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check():
    """
    Simple health check endpoint.

    Does NOT call the model or check the API key.

    Returns:
        {"status": "ok"}
    """
    return {"status": "ok"}
