"""
PokeAPIClient — read-only client for the public PokéAPI.

One ``httpx.AsyncClient`` is shared by all requests; it is opened when the
application is built and closed on shutdown.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from api.exceptions import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)

POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"


class PokeAPIClient:
    """Fetches pokemon data by name."""

    def __init__(
        self,
        base_url: str = POKEAPI_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    async def fetch_pokemon(self, name: str) -> Dict[str, Any]:
        """
        Return the raw PokéAPI payload for *name*.

        Raises
        ------
        NotFoundError
            PokéAPI answered 404.
        UpstreamError
            Any other HTTP status, a transport failure, or a non-JSON body.
        """
        slug = name.strip().lower()
        try:
            resp = await self._client.get(f"/pokemon/{slug}")
        except httpx.HTTPError as exc:
            logger.warning("PokéAPI request for %r failed: %s", slug, exc)
            raise UpstreamError("An error occurred while fetching the Pokémon data") from exc

        if resp.status_code == 404:
            raise NotFoundError("Your Pokémon was not found!")

        try:
            resp.raise_for_status()
            return resp.json()
        except (httpx.HTTPStatusError, ValueError) as exc:
            logger.warning("PokéAPI returned %s for %r", resp.status_code, slug)
            raise UpstreamError("An error occurred while fetching the Pokémon data") from exc

    async def aclose(self) -> None:
        await self._client.aclose()
