"""
Implementation SQLModel du repository du catalogue.

Implemente l'interface ICatalogRepository pour la persistance des films,
categories et liens film-categorie dans SQLite via SQLModel.
"""

from collections import defaultdict
from datetime import datetime
from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from cinelib.core.entities.catalog import Category, Movie
from cinelib.core.ports.repositories import ICatalogRepository, MovieNotFoundError
from cinelib.infrastructure.persistence.models import (
    CategoryModel,
    MovieCategoryLink,
    MovieModel,
)
from cinelib.utils.constants import LAST_VIEW_FORMAT


class SQLModelCatalogRepository(ICatalogRepository):
    """
    Repository SQLModel pour le catalogue.

    Implemente ICatalogRepository avec conversion bidirectionnelle
    entre l'entite Movie (domaine) et MovieModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: MovieModel, categories: Optional[list[str]] = None) -> Movie:
        """Convertit un modele DB en entite domaine."""
        return Movie(
            id=model.id,
            title=model.title,
            file_link=model.file_path,
            imdb_rating=model.imdb_rating if model.imdb_rating is not None else 0.0,
            personal_rating=model.personal_rating if model.personal_rating is not None else 0,
            last_view=model.last_view.strftime(LAST_VIEW_FORMAT) if model.last_view else None,
            categories=list(categories or []),
        )

    @staticmethod
    def _parse_last_view(value: Optional[str]) -> Optional[datetime]:
        """Un last_view textuel illisible n'est pas persiste."""
        if not value:
            return None
        try:
            return datetime.strptime(value, LAST_VIEW_FORMAT)
        except ValueError:
            logger.warning("last_view illisible non persiste", last_view=value)
            return None

    def _categories_by_movie(self, movie_ids: Optional[list[int]] = None) -> dict[int, list[str]]:
        """Noms des categories liees, par film, dans l'ordre des categories."""
        statement = (
            select(MovieCategoryLink.movie_id, CategoryModel.name)
            .join(CategoryModel, CategoryModel.id == MovieCategoryLink.category_id)
            .order_by(CategoryModel.id)
        )
        if movie_ids is not None:
            statement = statement.where(MovieCategoryLink.movie_id.in_(movie_ids))
        result: dict[int, list[str]] = defaultdict(list)
        for movie_id, name in self._session.exec(statement).all():
            result[movie_id].append(name)
        return result

    def _commit(self) -> None:
        """Valide la transaction ; en cas d'echec la session est remise en etat avant de relever."""
        try:
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise

    def _get_model(self, movie_id: int) -> MovieModel:
        model = self._session.get(MovieModel, movie_id)
        if model is None:
            raise MovieNotFoundError(movie_id)
        return model

    def list_movies(self) -> list[Movie]:
        """Liste tous les films avec leurs categories, par ID croissant."""
        models = self._session.exec(select(MovieModel).order_by(MovieModel.id)).all()
        categories = self._categories_by_movie()
        return [self._to_entity(model, categories.get(model.id)) for model in models]

    def get_movie(self, movie_id: int) -> Optional[Movie]:
        """Recupere un film par son ID."""
        model = self._session.get(MovieModel, movie_id)
        if model is None:
            return None
        categories = self._categories_by_movie([movie_id])
        return self._to_entity(model, categories.get(movie_id))

    def list_categories(self) -> list[Category]:
        """Liste les categories par ID croissant."""
        models = self._session.exec(select(CategoryModel).order_by(CategoryModel.id)).all()
        return [Category(id=model.id, name=model.name) for model in models]

    def insert_movie(self, movie: Movie) -> int:
        """Insere un film et retourne l'ID attribue (reporte aussi sur l'entite)."""
        model = MovieModel(
            title=movie.title,
            imdb_rating=movie.imdb_rating,
            personal_rating=movie.personal_rating,
            file_path=movie.file_link,
            last_view=self._parse_last_view(movie.last_view),
        )
        self._session.add(model)
        self._commit()
        self._session.refresh(model)
        movie.id = model.id
        logger.info("Film ajoute", movie_id=model.id, title=model.title)
        return model.id

    def update_movie(self, movie: Movie) -> None:
        """Met a jour un film existant."""
        if movie.id is None:
            raise ValueError("Impossible de mettre a jour un film sans ID")
        model = self._get_model(movie.id)
        model.title = movie.title
        model.imdb_rating = movie.imdb_rating
        model.personal_rating = movie.personal_rating
        model.file_path = movie.file_link
        model.last_view = self._parse_last_view(movie.last_view)
        self._session.add(model)
        self._commit()
        logger.debug("Film mis a jour", movie_id=movie.id)

    def delete_movie(self, movie_id: int) -> None:
        """Supprime un film ; les liens sont supprimes en cascade par SQLite."""
        model = self._get_model(movie_id)
        self._session.delete(model)
        self._commit()
        logger.info("Film supprime", movie_id=movie_id)

    def link_movie_category(self, movie_id: int, category_id: int) -> None:
        """Lie un film a une categorie ; sans effet si le lien existe deja."""
        existing = self._session.get(MovieCategoryLink, (movie_id, category_id))
        if existing is not None:
            return
        self._session.add(MovieCategoryLink(movie_id=movie_id, category_id=category_id))
        self._commit()
        logger.debug("Film lie a une categorie", movie_id=movie_id, category_id=category_id)

    def touch_last_viewed(self, movie_id: int, timestamp: datetime) -> None:
        """Enregistre la date de derniere lecture (a la seconde)."""
        model = self._get_model(movie_id)
        model.last_view = timestamp.replace(microsecond=0)
        self._session.add(model)
        self._commit()
