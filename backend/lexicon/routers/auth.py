"""
Router d'authentification du tableau de bord : inscription, connexion, déconnexion.

La session est portée par un cookie HttpOnly contenant uniquement un
identifiant opaque ; l'état (user_id, expiration) reste côté serveur.
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from lexicon.config import Settings
from lexicon.database import get_db
from lexicon.dependencies import get_settings, require_user
from lexicon.models.user import User
from lexicon.schemas.common import SuccessResponse
from lexicon.schemas.user import LoginRequest, UserCreate, UserResponse
from lexicon.services import auth_service, session_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentification"])


def _open_session(request: Request, response: Response, db: Session, settings: Settings, user: User) -> None:
    """Remplace une éventuelle session existante par une nouvelle et pose le cookie."""
    previous = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if previous:
        session_service.destroy_session(db, previous)

    ttl = timedelta(hours=settings.SESSION_TTL_HOURS)
    sid = session_service.create_session(db, user.id, ttl)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=sid,
        max_age=int(ttl.total_seconds()),
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


@router.post("/register", response_model=UserResponse, summary="Créer un compte")
def register(
    data: UserCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Crée le compte puis ouvre une session, comme après une connexion réussie."""
    user = auth_service.register(db, data)
    _open_session(request, response, db, settings, user)
    return user


@router.post("/login", response_model=UserResponse, summary="Se connecter")
def login(
    data: LoginRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = auth_service.authenticate(db, data.username, data.password)
    _open_session(request, response, db, settings, user)
    logger.info("Connexion : %s", user.username)
    return user


@router.post("/logout", response_model=SuccessResponse, summary="Se déconnecter")
def logout(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Détruit la session courante. Sans session, la réponse est la même."""
    sid = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if sid:
        session_service.destroy_session(db, sid)
        logger.info("Déconnexion d'une session")
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return SuccessResponse()


@router.get("/user", response_model=UserResponse, summary="Utilisateur connecté")
def current_user(user: User = Depends(require_user)):
    return user
