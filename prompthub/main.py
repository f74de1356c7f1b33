"""PromptHub FastAPI application."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prompthub.api.health import router as health_router
from prompthub.api.notifications import router as notifications_router
from prompthub.api.prompts import router as prompts_router
from prompthub.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PromptHub - Prompt Collaboration Service",
    description="Sharing, activity logs and notifications for managed prompts",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, tags=["Health"])
app.include_router(prompts_router, prefix="/v1", tags=["Prompts"])
app.include_router(notifications_router, prefix="/v1", tags=["Notifications"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"service": "PromptHub", "version": "0.1.0", "docs": "/docs"}
