"""
Pydantic Schemas
===============
Response models for the API.
"""
from .verse import VerseList, VerseOut

__all__ = ["VerseList", "VerseOut"]
