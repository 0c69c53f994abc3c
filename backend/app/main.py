"""
Notes API Backend - FastAPI Application

A note-taking backend with user accounts, note ownership and collaboration.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.core.exceptions import AppError
from app.core.logging import setup_logging
from app.database.connections import close_connections, get_database
from app.database.databases.notes_db import create_notes_indexes
from app.routers import auth, collaborations, health, notes, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging
    - Create indexes (including the unique username index)

    Startup fails if the indexes cannot be created; registration must not
    run without the unique username index.

    Shutdown:
    - Close the database connection pool
    """
    setup_logging()
    logger.info("Starting up Notes API...")

    db = await get_database()
    await create_notes_indexes(db)
    logger.info("Database indexes created")

    yield

    logger.info("Shutting down Notes API...")
    await close_connections()


app = FastAPI(
    title="Notes API",
    description="""
## Notes API

### Features
- **Users**: Registration, lookup, username search
- **Authentication**: JWT issued on login
- **Notes**: Owner-scoped notes with collaborator access
- **Collaborations**: Owners grant and revoke access to their notes

### Authentication
Protected endpoints take the JWT as a query parameter:
```
GET /notes?token=your_jwt_token
```

Obtain a token via `POST /auth/login`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render service-layer errors with their status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "status": "fail" if exc.status_code < 500 else "error",
            "message": exc.message,
        },
    )


app.include_router(health.router)
app.include_router(users.router)
app.include_router(auth.router)
app.include_router(notes.router)
app.include_router(collaborations.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Notes API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
