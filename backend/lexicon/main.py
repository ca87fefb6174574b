"""
Point d'entrée principal de l'API Lexicon Learners (inscriptions, contact, tableau de bord).
Démarrage : uvicorn lexicon.main:create_app --factory --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from lexicon.config import Settings, settings as default_settings
from lexicon.database import Database
from lexicon.errors import GENERIC_ERROR_MESSAGE, AppError, ErrorKind, ValidationError
from lexicon.routers import auth, contact, courses, enrollments
from lexicon.scheduler import start_scheduler, stop_scheduler
from lexicon.services.course_service import seed_default_courses

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie : création des tables, catalogue par défaut, scheduler de purge des sessions."""
    settings: Settings = app.state.settings
    database: Database = app.state.database

    database.create_all()

    if settings.SEED_DEFAULT_COURSES:
        db = database.SessionLocal()
        try:
            seed_default_courses(db)
        finally:
            db.close()

    scheduler = None
    if settings.SCHEDULER_ENABLED:
        scheduler = start_scheduler(database, settings.SESSION_PURGE_INTERVAL_MINUTES)

    yield

    if scheduler is not None:
        stop_scheduler(scheduler)
    database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Construit l'application. Le handle BDD est créé ici, une seule fois,
    et transmis aux routes via app.state (dépendance get_db).
    """
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Documentation interactive masquée en production.
    show_docs = settings.ENV != "production"
    app = FastAPI(
        title="Lexicon Learners API",
        description="API du site Lexicon Learners : inscriptions, contact et tableau de bord admin",
        version=API_VERSION,
        docs_url="/api/docs" if show_docs else None,
        redoc_url="/api/redoc" if show_docs else None,
        openapi_url="/api/openapi.json" if show_docs else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings.DATABASE_URL)

    # Le front (autre port en développement) envoie le cookie de session : credentials requis.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[],
        allow_origin_regex=settings.CORS_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
    )

    app.include_router(enrollments.router)
    app.include_router(contact.router)
    app.include_router(courses.router)
    app.include_router(auth.router)

    _register_exception_handlers(app)

    @app.get("/api/health", tags=["Santé"])
    def health_check():
        """Vérifie que l'API est opérationnelle."""
        return {"status": "ok", "service": "Lexicon Learners API", "version": API_VERSION}

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Le code HTTP dépend uniquement du kind de l'erreur."""
        if exc.kind is ErrorKind.PERSISTENCE:
            logger.error("Erreur de persistance sur %s %s", request.method, request.url.path)
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Corps invalide → 400 au format ValidationError (et non 422)."""
        error = ValidationError.from_pydantic(exc.errors())
        return JSONResponse(status_code=error.status_code, content=error.to_body())

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """Erreur BDD non classée (ex. base injoignable en lecture) : jamais de détail côté client."""
        logger.error("Erreur BDD non gérée : %s", exc, exc_info=True)
        return JSONResponse(status_code=500, content={"message": GENERIC_ERROR_MESSAGE})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """
        Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
        passe bien par CORSMiddleware (qui injecte les headers CORS).
        """
        logger.error("Exception non gérée : %s", exc, exc_info=True)
        return JSONResponse(status_code=500, content={"message": GENERIC_ERROR_MESSAGE})
