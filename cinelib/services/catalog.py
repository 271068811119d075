"""
Service de consultation et de maintenance du catalogue.

Charge les films depuis le repository puis delegue aux fonctions pures
(filtrage, detection des candidats a la suppression). Regroupe aussi les
modifications unitaires : titre, note personnelle, categories, suppression
et date de derniere lecture.
"""

from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from cinelib.core.entities.catalog import Category, FilterCriteria, Movie
from cinelib.core.ports.repositories import ICatalogRepository, MovieNotFoundError
from cinelib.services.catalog_filter import filter_movies
from cinelib.services.stale_detector import StaleReport, build_stale_report


class InvalidRatingError(ValueError):
    """Note personnelle hors de l'intervalle 0-10."""

    def __init__(self, rating: int) -> None:
        self.rating = rating
        super().__init__(f"Note invalide: {rating} (attendu entre 0 et 10)")


class UnknownCategoryError(LookupError):
    """Aucune categorie ne porte ce nom."""


def validate_personal_rating(rating: int) -> int:
    if not 0 <= rating <= 10:
        raise InvalidRatingError(rating)
    return rating


class CatalogService:
    """
    Service du catalogue.

    Attributes:
        clock: Fonction retournant l'instant courant (injectable pour les tests)
    """

    def __init__(
        self,
        repository: ICatalogRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repository = repository
        self.clock = clock

    def _require(self, movie_id: int) -> Movie:
        movie = self._repository.get_movie(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    def get_movie(self, movie_id: int) -> Movie:
        """
        Recupere un film par son ID.

        Raises:
            MovieNotFoundError: Film inexistant
        """
        return self._require(movie_id)

    def list_movies(self, criteria: Optional[FilterCriteria] = None) -> list[Movie]:
        """Films du catalogue, filtres si des criteres sont fournis."""
        movies = self._repository.list_movies()
        if criteria is None:
            return movies
        return filter_movies(movies, criteria)

    def list_categories(self) -> list[Category]:
        return self._repository.list_categories()

    def stale_report(self) -> StaleReport:
        """Candidats a la suppression a l'instant courant."""
        report = build_stale_report(self._repository.list_movies(), self.clock())
        if report:
            logger.info("Suppressions suggerees", count=len(report.candidates))
        return report

    def edit_movie(
        self,
        movie_id: int,
        title: Optional[str] = None,
        personal_rating: Optional[int] = None,
    ) -> Movie:
        """
        Modifie le titre et/ou la note personnelle d'un film.

        Raises:
            MovieNotFoundError: Film inexistant
            InvalidRatingError: Note hors bornes
            ValueError: Titre vide
        """
        movie = self._require(movie_id)
        if title is not None:
            if not title.strip():
                raise ValueError("Le titre d'un film ne peut pas etre vide")
            movie.title = title.strip()
        if personal_rating is not None:
            movie.personal_rating = validate_personal_rating(personal_rating)
        self._repository.update_movie(movie)
        return movie

    def rate_movie(self, movie_id: int, personal_rating: int) -> Movie:
        """Modifie uniquement la note personnelle (0-10)."""
        validate_personal_rating(personal_rating)
        return self.edit_movie(movie_id, personal_rating=personal_rating)

    def add_category(self, movie_id: int, category_name: str) -> Category:
        """
        Lie un film a une categorie designee par son nom (insensible a la casse).

        Raises:
            MovieNotFoundError: Film inexistant
            UnknownCategoryError: Aucune categorie de ce nom
        """
        self._require(movie_id)
        wanted = category_name.casefold()
        for category in self._repository.list_categories():
            if category.name.casefold() == wanted:
                self._repository.link_movie_category(movie_id, category.id)
                return category
        raise UnknownCategoryError(f"Categorie inconnue: {category_name}")

    def delete_movie(self, movie_id: int) -> Movie:
        """Supprime un film et retourne l'entite supprimee."""
        movie = self._require(movie_id)
        self._repository.delete_movie(movie_id)
        return movie

    def mark_viewed(self, movie_id: int) -> Movie:
        """Enregistre la lecture d'un film a l'instant courant."""
        self._require(movie_id)
        self._repository.touch_last_viewed(movie_id, self.clock())
        return self._require(movie_id)
