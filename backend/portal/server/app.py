from __future__ import annotations

import contextlib
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import structlog
from starlette.applications import Starlette
from starlette.middleware.authentication import AuthenticationMiddleware
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import Route

from portal.auth.backend import SessionBackend
from portal.auth.policy import guarded, public_route, validate_route_auth_policy
from portal.server.settings import PortalSettings
from portal.views.handlers import access_check, health
from portal.views.session_handlers import sign_in, sign_out
from portal.views.swirdle_handlers import (
    leaderboard,
    list_words,
    member_stats,
    publish_word,
    submit_guess,
    today_board,
    use_hint,
)
from portal.views.translation_handlers import delete_translation, get_translations, save_translation
from shared.auth.models import RequiredRole
from shared.auth.session_store import SessionStore
from shared.db import (
    Database,
    SqliteProfileRepository,
    SqliteSwirdleAttemptRepository,
    SqliteSwirdleStatsRepository,
    SqliteSwirdleWordRepository,
    SqliteTranslationRepository,
)
from shared.i18n import TranslationCache, TranslationService
from shared.logging import setup_logging
from swirdle.service import SwirdleService

logger = structlog.get_logger()

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable
    from datetime import date


def utc_today() -> date:
    return datetime.now(UTC).date()


def create_app(
    settings: PortalSettings | None = None,
    *,
    session_store: SessionStore | None = None,
    today: Callable[[], date] = utc_today,
) -> Starlette:
    if settings is None:  # pragma: no cover
        settings = PortalSettings()
    if session_store is None:
        session_store = SessionStore(ttl_seconds=settings.session_ttl_seconds)

    routes = [
        # Swirdle: any signed-in member
        Route("/api/swirdle/today", guarded()(today_board), methods=["GET"], name="swirdle_today"),
        Route("/api/swirdle/guesses", guarded()(submit_guess), methods=["POST"], name="swirdle_guess"),
        Route("/api/swirdle/hints/{index}", guarded()(use_hint), methods=["POST"], name="swirdle_hint"),
        Route("/api/swirdle/stats", guarded()(member_stats), methods=["GET"], name="swirdle_stats"),
        # Admin
        Route("/api/swirdle/words", guarded(RequiredRole.ADMIN)(list_words), methods=["GET"], name="swirdle_words"),
        Route(
            "/api/swirdle/leaderboard",
            guarded(RequiredRole.ADMIN)(leaderboard),
            methods=["GET"],
            name="swirdle_leaderboard",
        ),
        Route(
            "/api/swirdle/words/{word_id}/published",
            guarded(RequiredRole.ADMIN)(publish_word),
            methods=["PUT"],
            name="swirdle_publish_word",
        ),
        Route("/api/translations", guarded(RequiredRole.ADMIN)(save_translation), methods=["PUT"], name="save_translation"),
        Route(
            "/api/translations",
            guarded(RequiredRole.ADMIN)(delete_translation),
            methods=["DELETE"],
            name="delete_translation",
        ),
        # Public
        Route("/health", public_route(health), methods=["GET"], name="health"),
        Route("/api/session", public_route(sign_in), methods=["POST"], name="sign_in"),
        Route("/api/session", public_route(sign_out), methods=["DELETE"], name="sign_out"),
        Route("/api/access/{required_role}", public_route(access_check), methods=["GET"], name="access_check"),
        Route(
            "/api/translations/{content_type}/{content_id}",
            public_route(get_translations),
            methods=["GET"],
            name="get_translations",
        ),
    ]
    validate_route_auth_policy(routes)

    db = Database(settings.database_path)
    db.connect()
    profiles = SqliteProfileRepository(db)
    swirdle_service = SwirdleService(
        SqliteSwirdleWordRepository(db),
        SqliteSwirdleAttemptRepository(db),
        SqliteSwirdleStatsRepository(db),
        profiles,
    )
    translation_service = TranslationService(
        SqliteTranslationRepository(db),
        TranslationCache(max_entries=settings.translation_cache_size),
        default_language=settings.default_language,
    )

    @contextlib.asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncGenerator[None]:  # pragma: no cover
        session_store.start_cleanup()
        yield
        await session_store.stop_cleanup()
        db.close()

    app = Starlette(routes=routes, lifespan=lifespan)
    app.add_middleware(AuthenticationMiddleware, backend=SessionBackend(session_store, profiles))  # type: ignore[arg-type]
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
        allow_credentials=True,
    )

    app.state.db = db
    app.state.settings = settings
    app.state.session_store = session_store
    app.state.profiles = profiles
    app.state.swirdle_service = swirdle_service
    app.state.translation_service = translation_service
    app.state.today = today

    logger.info("portal server ready", database=settings.database_path)
    return app


def get_app() -> Starlette:  # pragma: no cover
    """Factory function for uvicorn --factory portal.server.app:get_app."""
    settings = PortalSettings()
    setup_logging(log_dir=settings.log_dir)
    return create_app(settings=settings)
