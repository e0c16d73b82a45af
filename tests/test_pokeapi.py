"""
Tests for the PokéAPI client, using ``httpx.MockTransport`` in place of
the network.
"""

import httpx
import pytest

from api.exceptions import NotFoundError, UpstreamError
from connectors.pokeapi import PokeAPIClient


def _client(handler) -> PokeAPIClient:
    return PokeAPIClient(
        base_url="https://pokeapi.test/api/v2",
        transport=httpx.MockTransport(handler),
    )


class TestFetchPokemon:
    @pytest.mark.asyncio
    async def test_success_returns_raw_payload(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json={"name": "pikachu", "id": 25})

        client = _client(handler)
        try:
            data = await client.fetch_pokemon("  Pikachu ")
        finally:
            await client.aclose()

        assert data == {"name": "pikachu", "id": 25}
        assert seen == ["/api/v2/pokemon/pikachu"]

    @pytest.mark.asyncio
    async def test_404_is_not_found(self):
        client = _client(lambda request: httpx.Response(404, text="Not Found"))
        try:
            with pytest.raises(NotFoundError):
                await client.fetch_pokemon("missingno")
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_server_error_is_upstream_error(self):
        client = _client(lambda request: httpx.Response(503))
        try:
            with pytest.raises(UpstreamError) as exc_info:
                await client.fetch_pokemon("pikachu")
        finally:
            await client.aclose()
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_transport_failure_is_upstream_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(handler)
        try:
            with pytest.raises(UpstreamError):
                await client.fetch_pokemon("pikachu")
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_non_json_body_is_upstream_error(self):
        client = _client(lambda request: httpx.Response(200, text="<html>"))
        try:
            with pytest.raises(UpstreamError):
                await client.fetch_pokemon("pikachu")
        finally:
            await client.aclose()
