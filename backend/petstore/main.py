"""Petstore API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Dispatcher built once in lifespan; startup aborts on any wiring defect
      (missing/duplicate handler, bad enum table) before traffic is accepted
    - Global error handlers shape every failure through the Error Translator
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Dispatcher stored on app.state and read via Depends(get_dispatcher): tests swap it
      with dependency_overrides
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from petstore.api.error_handlers import register_error_handlers
from petstore.api.routes import default, fake, health, pet, store, user
from petstore.config import Settings, get_settings
from petstore.core.domain_types import ENUM_CODEC
from petstore.infrastructure.database import init_db
from petstore.infrastructure.observability import setup_logging
from petstore.infrastructure.repositories import (
    SqlOrderRepository, SqlPetRepository, SqlUserRepository,
)
from petstore.schemas.validators import build_validator_registry
from petstore.services.dispatch_table import build_dispatcher
from petstore.services.request_dispatch import Dispatcher

logger = logging.getLogger(__name__)


def build_app_dispatcher(session_provider) -> Dispatcher:
    """Production wiring: SQL repositories + validator table + dispatch table."""
    return build_dispatcher(
        pets=SqlPetRepository(session_provider),
        orders=SqlOrderRepository(session_provider),
        users=SqlUserRepository(session_provider),
        validators=build_validator_registry(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_all()
    app.state.dispatcher = build_app_dispatcher(manager.session)
    logger.info(
        f"Petstore API started ({settings.environment}, "
        f"{len(app.state.dispatcher.request_types)} operations, "
        f"{len(ENUM_CODEC.enum_types)} wire enums)",
    )
    yield
    await manager.close()
    logger.info("Petstore API shutting down")


app = FastAPI(
    title="OpenAPI Petstore", version="1.0.1", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(default.router)
app.include_router(fake.router)
app.include_router(pet.router)
app.include_router(store.router)
app.include_router(user.router)

register_error_handlers(app)
