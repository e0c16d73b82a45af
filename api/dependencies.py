"""
FastAPI dependencies (shared across routes).
"""

from __future__ import annotations

from fastapi import Request

from connectors.pokeapi import PokeAPIClient


def get_pokeapi_client(request: Request) -> PokeAPIClient:
    """The application's shared PokéAPI client."""
    return request.app.state.pokeapi
