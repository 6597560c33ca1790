"""
Verse Schemas
=============
Response models for verse endpoints.
"""
from pydantic import BaseModel, Field
from typing import List


class VerseOut(BaseModel):
    """One verse, as plain text plus its markup identifiers"""

    n: int = Field(..., ge=0, le=99, description="Bottles on the wall at the start of the verse")
    id: str = Field(..., description="Element id of the verse, verse-<n>")
    text_id: str = Field(..., description="Element id of the verse body, verse-text-<n>")
    kind: str = Field(..., description="decrement or restock")
    count: str = Field(..., description="Displayed count (numeral or 'No more')")
    noun: str = Field(..., description="bottle or bottles")
    lines: List[str] = Field(default_factory=list)
    html: str = Field(..., description="Escaped HTML fragment for the verse")

    class Config:
        json_schema_extra = {
            "example": {
                "n": 1,
                "id": "verse-1",
                "text_id": "verse-text-1",
                "kind": "decrement",
                "count": "1",
                "noun": "bottle",
                "lines": [
                    "1 bottle of beer on the wall,",
                    "1 bottle of beer.",
                    "Take one down and pass it around,",
                    "no more bottles of beer on the wall.",
                ],
                "html": '<div id="verse-1" class="verse" ...></div>',
            }
        }


class VerseList(BaseModel):
    """All verses in singing order"""

    count: int = Field(default=0)
    verses: List[VerseOut] = Field(default_factory=list)
