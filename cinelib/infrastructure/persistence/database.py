"""
Configuration de la base de donnees SQLite pour CineLib.

Ce module fournit :
- Engine SQLite avec cles etrangeres actives (suppression en cascade des liens)
- Session factory
- SchemaState : creation des tables et insertion des categories initiales,
  une seule fois par processus

La base de donnees est configuree via CINELIB_DATABASE_URL (defaut: sqlite:///cinelib.db).
"""

import threading
from collections.abc import Generator
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine, event, func
from sqlmodel import Session, SQLModel, create_engine, select

from cinelib.infrastructure.persistence.models import CategoryModel
from cinelib.utils.constants import DEFAULT_CATEGORIES

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite n'applique ON DELETE CASCADE qu'avec ce PRAGMA."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Cree le repertoire parent si l'URL designe un fichier SQLite.
    """
    if database_url.startswith("sqlite:///") and not database_url.startswith("sqlite:///:memory:"):
        db_path = Path(database_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    engine = create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )
    if database_url.startswith("sqlite"):
        event.listen(engine, "connect", _enable_foreign_keys)
    return engine


def get_engine() -> Engine:
    """
    Retourne l'engine SQLite, en le creant si necessaire.

    Utilise la configuration de l'application pour le chemin de la BDD.
    """
    global _engine
    if _engine is None:
        from cinelib.config import Settings

        _engine = build_engine(Settings().database_url)
    return _engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() :
        session = next(get_session())

    Yields:
        Session SQLModel connectee a l'engine SQLite
    """
    with Session(get_engine()) as session:
        yield session


def seed_categories(session: Session) -> int:
    """
    Insere les categories par defaut si la table est vide.

    Returns:
        Nombre de categories inserees (0 si la table etait deja remplie)
    """
    count = session.exec(select(func.count()).select_from(CategoryModel)).one()
    if count:
        return 0
    for name in DEFAULT_CATEGORIES:
        session.add(CategoryModel(name=name))
    session.commit()
    logger.info("Categories par defaut inserees", count=len(DEFAULT_CATEGORIES))
    return len(DEFAULT_CATEGORIES)


class SchemaState:
    """
    Etat d'initialisation du schema pour un engine.

    ensure_initialized() cree les tables et les categories initiales une
    seule fois, meme appelee depuis plusieurs threads.
    """

    def __init__(self, engine: Optional[Engine] = None) -> None:
        self._engine = engine
        self._lock = threading.Lock()
        self._initialized = False

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = get_engine()
        return self._engine

    @property
    def initialized(self) -> bool:
        return self._initialized

    def ensure_initialized(self) -> None:
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            SQLModel.metadata.create_all(self.engine)
            with Session(self.engine) as session:
                seed_categories(session)
            self._initialized = True
            logger.debug("Schema initialise", url=str(self.engine.url))


_schema_state = SchemaState()


def init_db() -> None:
    """
    Initialise la base de donnees du processus (tables + categories).

    Doit etre appelee une fois au demarrage de l'application ; les appels
    suivants sont sans effet.
    """
    _schema_state.ensure_initialized()

