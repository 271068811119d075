"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des données
- ICatalogRepository : Stockage des films, catégories et liens
- MovieNotFoundError : Film absent du store

Ports récupération de pages : Contrats pour les services externes
- IPageFetcher : Récupération du HTML d'une page
- FetchError : Échec opaque de récupération
"""

from cinelib.core.ports.repositories import ICatalogRepository, MovieNotFoundError
from cinelib.core.ports.page_fetcher import FetchError, IPageFetcher

__all__ = [
    # Repositories
    "ICatalogRepository",
    "MovieNotFoundError",
    # Pages
    "IPageFetcher",
    "FetchError",
]
