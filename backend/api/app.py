"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.config import settings
from backend.flow.wizard import InvalidTransition


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    logging.basicConfig(level=settings.log_level)
    yield


app = FastAPI(
    title="Chatra Shayak API",
    description="Scholarship finder for students",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(InvalidTransition)
async def invalid_transition_handler(request: Request, exc: InvalidTransition):
    """Return 400 when a page action is not allowed from the posted state."""
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc)},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


# Import and include routers
from backend.api.routes import pages, search  # noqa: E402

app.include_router(search.router, prefix="/api/search", tags=["Search"])
app.include_router(pages.router, tags=["Pages"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
