"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI :
configuration, base de donnees, repository, client HTTP et services.
"""

from dependency_injector import containers, providers

from .adapters.web.page_fetcher import HttpPageFetcher
from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import SQLModelCatalogRepository
from .services.catalog import CatalogService
from .services.importer import ImportService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables et categories une fois
        catalog = container.catalog_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repository - Factory pour nouvelle instance avec session fraiche
    catalog_repository = providers.Factory(
        SQLModelCatalogRepository,
        session=session,
    )

    # Client HTTP - Singleton, User-Agent et timeout depuis la config
    page_fetcher = providers.Singleton(
        HttpPageFetcher,
        user_agent=config.provided.user_agent,
        timeout=config.provided.fetch_timeout,
    )

    catalog_service = providers.Factory(
        CatalogService,
        repository=catalog_repository,
    )

    import_service = providers.Factory(
        ImportService,
        repository=catalog_repository,
        page_fetcher=page_fetcher,
    )
