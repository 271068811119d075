"""
Module de persistance SQLite pour CineLib.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy) :

- database.py : Engine SQLite, session factory, SchemaState (tables + categories initiales)
- models.py : Modeles SQLModel representant les tables

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.
"""

from cinelib.infrastructure.persistence.database import (
    SchemaState,
    build_engine,
    get_engine,
    get_session,
    init_db,
    seed_categories,
)
from cinelib.infrastructure.persistence.models import (
    CategoryModel,
    MovieCategoryLink,
    MovieModel,
)

__all__ = [
    "SchemaState",
    "build_engine",
    "get_engine",
    "get_session",
    "init_db",
    "seed_categories",
    "CategoryModel",
    "MovieModel",
    "MovieCategoryLink",
]
