"""
Service d'import de films dans le catalogue.

Deux modes :
- import_from_url : recupere la page d'un film, en extrait titre/note/genres,
  enregistre le film puis le lie aux categories reconnues
- add_manual : enregistre un film saisi a la main (note IMDb inconnue)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from cinelib.core.entities.catalog import ExtractedMetadata, Movie
from cinelib.core.ports.page_fetcher import IPageFetcher
from cinelib.core.ports.repositories import ICatalogRepository
from cinelib.services.category_linker import resolve_genres
from cinelib.services.metadata_parser import extract
from cinelib.utils.constants import MOVIE_EXTENSIONS


@dataclass
class ImportResult:
    """Resultat d'un import par lien."""

    movie: Movie
    genres: tuple[str, ...] = ()
    linked_categories: list[str] = field(default_factory=list)

    @property
    def summary(self) -> str:
        """Message de confirmation : titre, note et genres extraits."""
        genre_info = f" [{', '.join(self.genres)}]" if self.genres else ""
        return f"Added '{self.movie.title}' with rating {self.movie.imdb_rating}{genre_info}"


def usable_rating(rating: float) -> float:
    """
    Note IMDb exploitable : une valeur hors de 0-10 (autre echelle, page
    mal formee) est traitee comme inconnue.
    """
    if 0.0 <= rating <= 10.0:
        return rating
    logger.debug("Note IMDb hors bornes ignoree", rating=rating)
    return 0.0


def is_movie_file(path: Path) -> bool:
    """Verifie que l'extension fait partie des formats video acceptes."""
    return path.suffix.lower() in MOVIE_EXTENSIONS


class ImportService:
    """
    Service d'ajout de films au catalogue.

    Orchestre la recuperation de page, l'extraction des metadonnees,
    la persistance du film et la liaison des categories.
    """

    def __init__(
        self,
        repository: ICatalogRepository,
        page_fetcher: Optional[IPageFetcher] = None,
    ) -> None:
        """
        Initialise le service.

        Args:
            repository: Repository du catalogue
            page_fetcher: Client de recuperation des pages (requis pour import_from_url)
        """
        self._repository = repository
        self._page_fetcher = page_fetcher

    async def import_from_url(self, url: str, file_path: Path) -> ImportResult:
        """
        Importe un film depuis sa page web.

        Args:
            url: Adresse de la page du film
            file_path: Fichier video local associe

        Returns:
            ImportResult avec le film enregistre et les categories liees

        Raises:
            FetchError: Si la page ne peut pas etre recuperee
        """
        if self._page_fetcher is None:
            raise RuntimeError("Aucun client de recuperation de pages configure")
        page = await self._page_fetcher.fetch(url)
        metadata = extract(page)
        return self.save_extracted(metadata, file_path)

    def save_extracted(self, metadata: ExtractedMetadata, file_path: Path) -> ImportResult:
        """
        Enregistre un film a partir des metadonnees extraites.

        Le film est cree avec une note personnelle de 0. Un echec de liaison
        pour un genre est journalise et n'interrompt pas l'import.
        """
        movie = Movie(
            title=metadata.title,
            imdb_rating=usable_rating(metadata.rating),
            personal_rating=0,
            file_link=str(file_path.expanduser().resolve()),
        )
        movie_id = self._repository.insert_movie(movie)

        linked: list[str] = []
        if metadata.genres:
            categories = self._repository.list_categories()
            names = {category.id: category.name for category in categories}
            for request in resolve_genres(metadata.genres, categories):
                try:
                    self._repository.link_movie_category(movie_id, request.category_id)
                except SQLAlchemyError as e:
                    logger.error(
                        "Echec de liaison de categorie",
                        movie_id=movie_id,
                        category_id=request.category_id,
                        error=str(e),
                    )
                    continue
                name = names[request.category_id]
                if name not in linked:
                    linked.append(name)
        movie.categories = linked

        logger.info(
            "Film importe",
            movie_id=movie_id,
            title=movie.title,
            rating=movie.imdb_rating,
            categories=linked,
        )
        return ImportResult(movie=movie, genres=metadata.genres, linked_categories=linked)

    def add_manual(
        self,
        file_path: Path,
        title: Optional[str] = None,
        personal_rating: int = 0,
    ) -> Movie:
        """
        Ajoute un film saisi manuellement.

        Args:
            file_path: Fichier video local
            title: Titre (defaut : nom du fichier)
            personal_rating: Note personnelle 0-10

        Raises:
            ValueError: Si la note est hors bornes
        """
        movie = Movie(
            title=title or file_path.name,
            imdb_rating=0.0,
            personal_rating=personal_rating,
            file_link=str(file_path.expanduser().resolve()),
        )
        self._repository.insert_movie(movie)
        return movie
