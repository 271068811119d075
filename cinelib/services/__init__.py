"""
Couche application : fonctions pures du catalogue et services.

- metadata_parser : extraction titre/note/genres d'une page HTML
- catalog_filter : filtrage du catalogue en memoire
- stale_detector : candidats a la suppression
- category_linker : resolution des genres vers les categories
- importer : import par lien ou saisie manuelle
- catalog : consultation et modifications du catalogue
"""

from cinelib.services.catalog import (
    CatalogService,
    InvalidRatingError,
    UnknownCategoryError,
)
from cinelib.services.catalog_filter import filter_movies
from cinelib.services.category_linker import resolve_genres
from cinelib.services.importer import ImportResult, ImportService
from cinelib.services.metadata_parser import extract
from cinelib.services.stale_detector import (
    StaleReport,
    find_stale_candidates,
    format_stale_warning,
)

__all__ = [
    "CatalogService",
    "InvalidRatingError",
    "UnknownCategoryError",
    "ImportService",
    "ImportResult",
    "extract",
    "filter_movies",
    "find_stale_candidates",
    "format_stale_warning",
    "StaleReport",
    "resolve_genres",
]
