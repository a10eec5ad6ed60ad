"""
FastAPI entrypoint for the Staybook rental listing backend.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from staybook.core.config import settings
from staybook.core.utils import UPLOADS_PATH
from staybook.db.session import init_db
from staybook.api.router import api_router
import logging
import os

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"{settings.APP_NAME} started")
    yield


app = FastAPI(
    title="Staybook API",
    description="Backend API for listing and booking rental places",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware; credentials are needed for the session cookie
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Serve uploaded photos at /uploads
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount(UPLOADS_PATH, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Staybook API is running"}
