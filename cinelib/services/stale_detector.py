"""
Detection des films candidats a la suppression.

Un film est suggere quand sa note personnelle est inferieure a 6 et qu'il
n'a pas ete ouvert depuis 2 ans. La detection est purement consultative :
elle ne supprime rien et produit un message d'avertissement fixe.

Regle connue et conservee telle quelle : un last_view absent rend le film
candidat, alors qu'un last_view illisible ne le rend pas candidat.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from loguru import logger

from cinelib.core.entities.catalog import Movie
from cinelib.utils.constants import STALE_AFTER_YEARS, STALE_RATING_THRESHOLD

STALE_WARNING_TITLE = "Suggested Deletions"
STALE_WARNING_HEADER = (
    "The following movies have a rating below 6 and haven't been opened for 2 years:"
)
STALE_WARNING_FOOTER = "Please consider deleting them."


@dataclass
class StaleReport:
    """Candidats a la suppression et message a presenter."""

    candidates: list[Movie] = field(default_factory=list)

    @property
    def message(self) -> str:
        return format_stale_warning(self.candidates)

    def __bool__(self) -> bool:
        return bool(self.candidates)


def parse_last_view(value: str) -> Optional[datetime]:
    """
    Parse un last_view "YYYY-MM-DD HH:MM:SS" en datetime local.

    L'espace est remplace par "T" puis la valeur est lue au format ISO.
    Une date sans heure ou avec fuseau horaire est refusee.

    Returns:
        datetime naif, ou None si la valeur est illisible
    """
    iso_value = value.strip().replace(" ", "T")
    if "T" not in iso_value:
        return None
    try:
        parsed = datetime.fromisoformat(iso_value)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        return None
    return parsed


def years_before(moment: datetime, years: int) -> datetime:
    """Recule de N annees calendaires (29 fevrier -> 28 fevrier)."""
    try:
        return moment.replace(year=moment.year - years)
    except ValueError:
        return moment.replace(year=moment.year - years, day=28)


def is_stale(movie: Movie, cutoff: datetime) -> bool:
    """Un film est candidat si note < 6 et last_view absent ou anterieur a cutoff."""
    if movie.personal_rating >= STALE_RATING_THRESHOLD:
        return False
    if not movie.last_view:
        return True
    last_view = parse_last_view(movie.last_view)
    if last_view is None:
        # Donnee mal formee : jamais de suggestion de suppression
        logger.debug("last_view illisible", movie_id=movie.id, last_view=movie.last_view)
        return False
    return last_view < cutoff


def find_stale_candidates(movies: Iterable[Movie], now: datetime) -> list[Movie]:
    """
    Retourne les films candidats a la suppression, dans l'ordre d'entree.

    Args:
        movies: Films charges en memoire
        now: Instant de reference (datetime local naif)
    """
    cutoff = years_before(now, STALE_AFTER_YEARS)
    return [movie for movie in movies if is_stale(movie, cutoff)]


def format_stale_warning(candidates: Iterable[Movie]) -> str:
    """Message d'avertissement listant les titres des candidats."""
    lines = [STALE_WARNING_HEADER]
    lines.extend(f"- {movie.title}" for movie in candidates)
    return "\n".join(lines) + "\n\n" + STALE_WARNING_FOOTER


def build_stale_report(movies: Iterable[Movie], now: datetime) -> StaleReport:
    return StaleReport(candidates=find_stale_candidates(movies, now))
