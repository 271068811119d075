"""
Fixtures pytest partagees pour les tests CineLib.

Ce module contient les fixtures communes utilisees dans les tests:
- Catalogue de films et categories en memoire
- Mock du repository (ICatalogRepository)
- Base SQLite en memoire initialisee (tables + categories)
- Settings de test avec chemins temporaires
"""

from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from cinelib.config import Settings
from cinelib.core.entities.catalog import Category, Movie
from cinelib.core.ports.repositories import ICatalogRepository
from cinelib.infrastructure.persistence.database import SchemaState, _enable_foreign_keys
from cinelib.utils.constants import DEFAULT_CATEGORIES

# Instant de reference fixe pour les tests de date
NOW = datetime(2025, 6, 15, 12, 0, 0)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def known_categories() -> list[Category]:
    """Les 19 categories par defaut, ID 1 a 19."""
    return [Category(id=i, name=name) for i, name in enumerate(DEFAULT_CATEGORIES, start=1)]


@pytest.fixture
def sample_movies() -> list[Movie]:
    """Petit catalogue varie (notes, categories, dates de lecture)."""
    return [
        Movie(
            id=1,
            title="Inception",
            file_link="/films/inception.mkv",
            imdb_rating=8.8,
            personal_rating=9,
            last_view="2025-01-10 21:00:00",
            categories=["Action", "Science Fiction"],
        ),
        Movie(
            id=2,
            title="The Room",
            file_link="/films/the_room.mp4",
            imdb_rating=3.6,
            personal_rating=2,
            last_view=None,
            categories=["Drama"],
        ),
        Movie(
            id=3,
            title="Paddington 2",
            file_link="/films/paddington2.avi",
            imdb_rating=7.8,
            personal_rating=5,
            last_view="2019-03-02 18:30:00",
            categories=["Family", "Comedy"],
        ),
        Movie(
            id=4,
            title="Room",
            file_link="/films/room.mov",
            imdb_rating=8.1,
            personal_rating=7,
            last_view="2024-12-24 20:00:00",
            categories=["Drama"],
        ),
        Movie(
            id=5,
            title="Unrated Home Video",
            file_link="/films/home.mkv",
        ),
    ]


@pytest.fixture
def mock_repository(known_categories) -> MagicMock:
    """
    Mock de ICatalogRepository.

    insert_movie retourne 42 par defaut ; list_categories retourne
    les categories par defaut.
    """
    repo = MagicMock(spec=ICatalogRepository)
    repo.insert_movie.return_value = 42
    repo.list_categories.return_value = known_categories
    repo.list_movies.return_value = []
    repo.get_movie.return_value = None
    return repo


@pytest.fixture
def engine():
    """Engine SQLite en memoire partage entre connexions, cles etrangeres actives."""
    from sqlalchemy import event

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _enable_foreign_keys)
    SchemaState(engine).ensure_initialized()
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec base et logs dans tmp_path."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "test.log",
        player_command="true",
    )


@pytest.fixture
def movie_file(tmp_path: Path) -> Path:
    """Fichier video vide dans tmp_path."""
    path = tmp_path / "inception.mkv"
    path.write_bytes(b"\x00")
    return path
