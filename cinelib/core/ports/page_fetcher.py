"""
Interface port pour la récupération de pages web.

Le domaine n'a besoin que du texte HTML d'une URL. Tout échec (réseau,
timeout, statut non 2xx) est remonté sous une seule forme : FetchError.
"""

from abc import ABC, abstractmethod
from typing import Optional


class FetchError(Exception):
    """
    Échec de récupération d'une page.

    Attributes:
        url: URL demandée
        status_code: Code HTTP reçu, ou None si aucune réponse
    """

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Echec de recuperation de {url}: {reason}")


class IPageFetcher(ABC):
    """Récupère le contenu HTML d'une page."""

    @abstractmethod
    async def fetch(self, url: str) -> str:
        """
        Retourne le HTML de la page.

        Raises:
            FetchError: Pour toute erreur réseau ou réponse non 2xx
        """
        ...

    async def close(self) -> None:
        """Libère les ressources éventuelles (client HTTP)."""
        return None
