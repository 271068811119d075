"""
Business entities representing core domain concepts.

Exports:
- Movie: A cataloged local video file
- Category: A genre category movies are linked to
- LinkRequest: Instruction to link a movie to a category
- ExtractedMetadata: Facts scraped from a movie page
- FilterCriteria: Criteria applied to the in-memory catalog
"""

from cinelib.core.entities.catalog import (
    Category,
    ExtractedMetadata,
    FilterCriteria,
    LinkRequest,
    Movie,
)

__all__ = [
    "Movie",
    "Category",
    "LinkRequest",
    "ExtractedMetadata",
    "FilterCriteria",
]
