"""
REST API routes — pokemon lookup and the protected catch/release/caught
endpoints.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_pokeapi_client
from api.exceptions import BadRequestError, NotFoundError
from auth.dependencies import db_session, get_current_user_id
from connectors.pokeapi import PokeAPIClient
from database.helpers import catch_pokemon, list_caught_pokemon, release_pokemon
from utils.schemas import (
    CatchRequest,
    CatchResponse,
    CaughtListResponse,
    CaughtRecord,
    CaughtRecordWithPokemon,
    MessageResponse,
    PokemonData,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pokemon"])
protected_router = APIRouter(tags=["protected"])


@router.get("/pokemon/{name}", response_model=PokemonData)
async def get_pokemon(
    name: str,
    pokeapi: PokeAPIClient = Depends(get_pokeapi_client),
) -> Dict[str, Any]:
    """Proxy a lookup to PokéAPI."""
    logger.debug("Looking up %s on PokéAPI", name)
    return {"data": await pokeapi.fetch_pokemon(name)}


@protected_router.post("/catch", response_model=CatchResponse)
async def catch(
    req: Optional[CatchRequest] = Body(None),
    session: AsyncSession = Depends(db_session),
    user_id: str = Depends(get_current_user_id),
) -> Dict[str, Any]:
    """Record a caught pokemon for the authenticated user."""
    name = ((req and req.name) or "").strip()
    if not name:
        raise BadRequestError("Pokemon name is required")

    caught = await catch_pokemon(session, user_id, name)
    return {"message": "Pokemon caught", "data": CaughtRecord.model_validate(caught)}


@protected_router.delete("/release/{caught_id}", response_model=MessageResponse)
async def release(
    caught_id: str,
    session: AsyncSession = Depends(db_session),
    user_id: str = Depends(get_current_user_id),
) -> Dict[str, Any]:
    """Release one of the authenticated user's pokemon."""
    deleted = await release_pokemon(session, user_id, caught_id)
    if not deleted:
        raise NotFoundError("Pokemon not found or not owned by user")
    return {"message": "Pokemon is released"}


@protected_router.get(
    "/caught",
    response_model=CaughtListResponse,
    response_model_exclude_none=True,
)
async def caught(
    session: AsyncSession = Depends(db_session),
    user_id: str = Depends(get_current_user_id),
) -> Dict[str, Any]:
    """List the authenticated user's caught pokemon."""
    records = await list_caught_pokemon(session, user_id)
    if not records:
        return {"message": "No Pokémon found."}
    return {"data": [CaughtRecordWithPokemon.model_validate(r) for r in records]}
