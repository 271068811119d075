"""
Recuperation des pages de films via httpx.

Implemente IPageFetcher. La requete imite un navigateur (User-Agent) et
suit les redirections. Aucune relance automatique : toute erreur reseau,
tout timeout et tout statut non 2xx deviennent une FetchError.

Usage:
    fetcher = HttpPageFetcher(user_agent="Mozilla/5.0 ...")
    html = await fetcher.fetch("https://www.imdb.com/title/tt1375666/")
    await fetcher.close()
"""

from typing import Optional

import httpx
from loguru import logger

from cinelib.core.ports.page_fetcher import FetchError, IPageFetcher
from cinelib.utils.constants import DEFAULT_USER_AGENT


class HttpPageFetcher(IPageFetcher):
    """
    Client HTTP pour les pages de films.

    Le client httpx est cree a la premiere requete et reutilise ensuite.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client.

        Args:
            user_agent: En-tete User-Agent envoye avec chaque requete
            timeout: Delai maximum d'une requete en secondes
        """
        self._user_agent = user_agent
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={
                    "User-Agent": self._user_agent,
                    "Accept": "text/html,application/xhtml+xml",
                },
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    async def fetch(self, url: str) -> str:
        """
        Recupere le HTML d'une page.

        Raises:
            FetchError: URL invalide, erreur reseau, timeout ou statut non 2xx
        """
        client = self._get_client()
        logger.debug("Recuperation de la page", url=url)
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                url, f"HTTP {e.response.status_code}", status_code=e.response.status_code
            ) from e
        except httpx.TimeoutException as e:
            raise FetchError(url, "timeout") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(url, str(e) or type(e).__name__) from e
        return response.text

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
