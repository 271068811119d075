"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance du
catalogue. L'implémentation concrète (SQLite via SQLModel) se trouve dans
cinelib/infrastructure/persistence/repositories/.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from cinelib.core.entities.catalog import Category, Movie


class MovieNotFoundError(LookupError):
    """Levée quand un film n'existe pas dans le store."""

    def __init__(self, movie_id: int) -> None:
        self.movie_id = movie_id
        super().__init__(f"Film introuvable: id={movie_id}")


class ICatalogRepository(ABC):
    """
    Interface de stockage du catalogue.

    Le store garantit l'unicité des noms de catégorie et la suppression
    en cascade des liens film-catégorie.
    """

    @abstractmethod
    def list_movies(self) -> list[Movie]:
        """Liste tous les films avec leurs catégories."""
        ...

    @abstractmethod
    def get_movie(self, movie_id: int) -> Optional[Movie]:
        """Récupère un film par son ID."""
        ...

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Liste les catégories dans l'ordre d'énumération du store."""
        ...

    @abstractmethod
    def insert_movie(self, movie: Movie) -> int:
        """Insère un film et retourne l'ID attribué."""
        ...

    @abstractmethod
    def update_movie(self, movie: Movie) -> None:
        """Met à jour titre, notes, chemin et last_view d'un film existant."""
        ...

    @abstractmethod
    def delete_movie(self, movie_id: int) -> None:
        """Supprime un film (les liens sont supprimés en cascade)."""
        ...

    @abstractmethod
    def link_movie_category(self, movie_id: int, category_id: int) -> None:
        """Lie un film à une catégorie. Sans effet si le lien existe déjà."""
        ...

    @abstractmethod
    def touch_last_viewed(self, movie_id: int, timestamp: datetime) -> None:
        """Enregistre la date de dernière lecture d'un film."""
        ...
