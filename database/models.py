"""
SQLAlchemy ORM models for users, pokemon and the caught-pokemon ledger.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    user_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    caught = relationship("CaughtPokemon", back_populates="user", cascade="all, delete-orphan")


class Pokemon(Base):
    __tablename__ = "pokemon"

    pokemon_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(128), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    caught = relationship("CaughtPokemon", back_populates="pokemon", cascade="all, delete-orphan")


class CaughtPokemon(Base):
    __tablename__ = "caught_pokemon"
    __table_args__ = (Index("ix_caught_pokemon_user_id", "user_id"),)

    caught_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    pokemon_id = Column(Uuid(as_uuid=True), ForeignKey("pokemon.pokemon_id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    user = relationship("User", back_populates="caught")
    pokemon = relationship("Pokemon", back_populates="caught")
