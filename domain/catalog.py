"""The read only catalog of all recipes."""

import logging

import httpx

from domain.models import Recipe


logger = logging.getLogger(__name__)


CATALOG_PATH = "data.json"
TIMEOUT = 20


def catalog_client_factory(
    base_url: str = "http://catalog",
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float = TIMEOUT,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)


class RecipeCatalog:
    """One shot fetch of the catalog, kept in memory afterwards."""

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        path: str = CATALOG_PATH,
    ) -> None:
        self.client = catalog_client_factory() if client is None else client
        self.path = path
        self.recipes: list[Recipe] = []
        self.fetched = False

    async def fetch_all(self) -> list[Recipe]:
        """All recipes in the catalog, or none if they can't be had."""
        try:
            resp = await self.client.get(self.path)
            resp.raise_for_status()
            self.recipes = [Recipe.from_dict(r) for r in resp.json()]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.error("Error fetching recipes: %r", e)
            self.recipes = []
        self.fetched = True
        return self.recipes

    async def all(self) -> list[Recipe]:
        """The in-memory copy, fetched on first use. A failed fetch stays empty."""
        if not self.fetched:
            await self.fetch_all()
        return self.recipes
