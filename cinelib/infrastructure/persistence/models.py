"""
Modeles SQLModel pour la base de donnees CineLib.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- categories: Categories de genre (nom unique)
- movies: Films catalogues
- movie_category: Liens film-categorie, supprimes en cascade
"""

from datetime import datetime

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field, SQLModel


class CategoryModel(SQLModel, table=True):
    """Categorie de genre."""

    __tablename__ = "categories"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True, nullable=False)


class MovieModel(SQLModel, table=True):
    """
    Modele representant un film dans la base de donnees.

    file_path pointe vers le fichier video local.
    """

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, nullable=False, index=True)
    imdb_rating: float | None = None  # Note IMDb (0-10)
    personal_rating: int | None = None  # Note personnelle (0-10)
    file_path: str = Field(max_length=500, nullable=False)
    last_view: datetime | None = None


class MovieCategoryLink(SQLModel, table=True):
    """Lien film-categorie, cle primaire composite."""

    __tablename__ = "movie_category"

    movie_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("movies.id", ondelete="CASCADE"),
            primary_key=True,
        )
    )
    category_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("categories.id", ondelete="CASCADE"),
            primary_key=True,
        )
    )
