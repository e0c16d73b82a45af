"""
Pokédex Catch API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.exceptions import register_exception_handlers
from api.middleware import register_middleware
from api.routes import protected_router
from api.routes import router as pokemon_router
from auth.routes import router as auth_router
from config.settings import Settings, config
from connectors.pokeapi import PokeAPIClient
from database.session import build_engine, build_session_factory, create_tables

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("httpcore", "httpx", "aiosqlite"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or config

    app = FastAPI(
        title="Pokédex Catch API",
        version="1.0.0",
        description="Register, log in, look up and catch Pokémon.",
    )

    # Shared resources, injected into handlers through dependencies
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.pokeapi = PokeAPIClient(
        base_url=settings.pokeapi_base_url,
        timeout=settings.pokeapi_timeout,
    )

    register_middleware(app)

    # CORS stays outermost so the catch-all 500 carries CORS headers too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router)
    app.include_router(pokemon_router)
    app.include_router(protected_router, prefix="/protected")

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok"}

    @app.on_event("startup")
    async def on_startup():
        if settings.db_create_tables:
            logger.info("Creating database tables…")
            await create_tables(app.state.engine)
        logger.info("Application ready to accept requests.")

    @app.on_event("shutdown")
    async def on_shutdown():
        await app.state.pokeapi.aclose()
        await app.state.engine.dispose()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
