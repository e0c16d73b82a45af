"""
Database helper functions — the caught-pokemon ledger.

Every query is scoped to the owning user; ownership is enforced in the
``WHERE`` clause rather than by loading and checking rows.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from database.models import CaughtPokemon, Pokemon, User

logger = logging.getLogger(__name__)


def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    return uuid.UUID(value) if isinstance(value, str) else value


def _insert_for(session: AsyncSession):
    if session.get_bind().dialect.name == "sqlite":
        return sqlite_insert
    return pg_insert


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_or_create_pokemon(session: AsyncSession, name: str) -> Pokemon:
    """
    Return the ``Pokemon`` row for *name*, inserting it if needed.

    The insert is ``ON CONFLICT DO NOTHING`` on the unique name, so two
    requests catching a new name at the same time still end up sharing a
    single row.
    """
    result = await session.execute(select(Pokemon).where(Pokemon.name == name))
    pokemon = result.scalar_one_or_none()
    if pokemon is not None:
        return pokemon

    insert = _insert_for(session)
    stmt = (
        insert(Pokemon)
        .values(pokemon_id=uuid.uuid4(), name=name)
        .on_conflict_do_nothing(index_elements=["name"])
    )
    await session.execute(stmt)

    result = await session.execute(select(Pokemon).where(Pokemon.name == name))
    return result.scalar_one()


async def catch_pokemon(session: AsyncSession, user_id: str, name: str) -> CaughtPokemon:
    """Record that *user_id* caught *name*; creates the pokemon on first catch."""
    pokemon = await get_or_create_pokemon(session, name)
    caught = CaughtPokemon(
        caught_id=uuid.uuid4(),
        user_id=_to_uuid(user_id),
        pokemon_id=pokemon.pokemon_id,
    )
    session.add(caught)
    await session.flush()
    logger.info("User %s caught %s (%s)", user_id, name, caught.caught_id)
    return caught


async def release_pokemon(session: AsyncSession, user_id: str, caught_id: str) -> int:
    """
    Delete the caught record matching both *caught_id* and *user_id*.

    Returns the number of rows deleted (0 when the record does not exist
    or belongs to someone else). A malformed id matches nothing.
    """
    try:
        cid = _to_uuid(caught_id)
    except ValueError:
        return 0

    result = await session.execute(
        delete(CaughtPokemon).where(
            CaughtPokemon.caught_id == cid,
            CaughtPokemon.user_id == _to_uuid(user_id),
        )
    )
    if result.rowcount:
        logger.info("User %s released %s", user_id, caught_id)
    return result.rowcount


async def list_caught_pokemon(session: AsyncSession, user_id: str) -> List[CaughtPokemon]:
    """All caught records for *user_id*, oldest first, with the pokemon loaded."""
    result = await session.execute(
        select(CaughtPokemon)
        .options(selectinload(CaughtPokemon.pokemon))
        .where(CaughtPokemon.user_id == _to_uuid(user_id))
        .order_by(CaughtPokemon.created_at.asc())
    )
    return list(result.scalars().all())
