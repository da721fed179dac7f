"""
Pydantic models for what gets extracted from the source site.

CoverMetadata describes the novel landing page, ChapterRecord a single
chapter page once it has been cleaned.
"""

from pydantic import BaseModel, Field
from typing import Optional


class CoverMetadata(BaseModel):
    """Metadata read from the novel landing page."""

    title: str = Field(..., min_length=1, description="Normalized title, safe to use as a path segment")
    author: str = Field(..., description="Author name as shown on the page")
    cover_image_url: str = Field(..., description="Absolute url of the cover image (lazy-load source)")
    cover_image_kind: str = Field(..., description="File extension of the cover image, e.g. 'jpg'")
    first_chapter_url: str = Field(..., description="Link to the first chapter, usually host-relative")


class ChapterRecord(BaseModel):
    """A chapter page after extraction."""

    sequence_number: int = Field(..., ge=1, description="1 for the first chapter, +1 per advance")
    title: str = Field(..., min_length=1)
    body_html: str = Field(..., description="Chapter markup with advertisement blocks removed")
    next_chapter_url: Optional[str] = Field(None, description="Link to the next chapter, None on the last one")
