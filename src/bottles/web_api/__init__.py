"""
Bottles Web API
===============
FastAPI app serving the lyrics page and verse data.

Quick Start:
    uvicorn bottles.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
