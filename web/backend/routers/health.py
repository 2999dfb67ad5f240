#!/usr/bin/env python3
"""
Health endpoint.
"""

from fastapi import APIRouter

from ..models.responses import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Liveness probe; does not touch storage."""
    return HealthResponse(status="ok")
