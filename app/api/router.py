"""
API router - aggregates all endpoint modules (mounted under /api).
"""

from fastapi import APIRouter

from app.api.endpoints import auth, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
