"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import health, lyrics

__all__ = ["health", "lyrics"]
