"""
Pydantic schemas for the pokemon and caught-pokemon endpoints.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    message: str
    token: str


class CatchRequest(BaseModel):
    # Optional so a missing name answers 400 rather than a validation 422
    name: Optional[str] = None


class PokemonData(BaseModel):
    data: Dict[str, Any]


class PokemonInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    pokemon_id: uuid.UUID
    name: str


class CaughtRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    caught_id: uuid.UUID
    user_id: uuid.UUID
    pokemon_id: uuid.UUID
    created_at: datetime


class CaughtRecordWithPokemon(CaughtRecord):
    pokemon: PokemonInfo


class CatchResponse(BaseModel):
    message: str
    data: CaughtRecord


class CaughtListResponse(BaseModel):
    """Either ``data`` (non-empty list) or ``message`` (nothing caught yet)."""

    data: Optional[List[CaughtRecordWithPokemon]] = None
    message: Optional[str] = None
