"""
Health Check Router
==================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter

from bottles import __version__
from bottles.lyrics.verses import generate_lyrics

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    Ready once the lyrics body can be produced.
    """
    lyrics = generate_lyrics()
    return {"status": "ready" if lyrics else "degraded"}
