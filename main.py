# main.py
"""
Application entrypoint. Includes routers and mounts.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routers import groups
from app.config.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title="Coffee Roulette Grouping")

# Basic CORS (adjust origins in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# include routers
app.include_router(groups.router, prefix="/api/v1/groups", tags=["groups"])


@app.get("/")
async def index():
    """Health / basic info endpoint."""
    return {"status": "ok", "service": "coffee-roulette", "env": settings.ENV}
