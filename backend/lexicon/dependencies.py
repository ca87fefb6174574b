"""
Dépendances FastAPI du contrôle d'accès.

La session est résolue à chaque requête et l'utilisateur relu en base :
un compte supprimé ou modifié est pris en compte immédiatement.
"""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from lexicon.config import Settings
from lexicon.database import get_db
from lexicon.errors import AuthenticationError, ForbiddenError
from lexicon.models.user import User
from lexicon.services import session_service, user_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Optional[User]:
    """Utilisateur de la session courante, ou None (pas de cookie, session expirée, compte disparu)."""
    sid = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not sid:
        return None

    payload = session_service.get_session(db, sid)
    if not payload or "user_id" not in payload:
        return None

    return user_service.get_user(db, payload["user_id"])


def require_user(user: Optional[User] = Depends(get_current_user)) -> User:
    """Garde des routes admin : lève AuthenticationError si la requête n'est pas authentifiée."""
    if user is None:
        raise AuthenticationError()
    return user


def require_admin(
    user: User = Depends(require_user),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    Garde des routes du tableau de bord.
    Par défaut tout utilisateur connecté y a accès ; ADMIN_REQUIRE_FLAG exige is_admin.
    """
    if settings.ADMIN_REQUIRE_FLAG and not user.is_admin:
        raise ForbiddenError()
    return user
