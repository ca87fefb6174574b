"""
Store des sessions d'authentification (table user_sessions).

Une session associe un identifiant opaque à un payload JSON ({"user_id": ...})
et à une date d'expiration. Les sessions expirées sont ignorées à la lecture
et purgées périodiquement par le scheduler.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lexicon.errors import PersistenceError
from lexicon.models.session import UserSession

logger = logging.getLogger(__name__)

SESSION_ID_BYTES = 32


def _utcnow() -> datetime:
    # Colonnes DateTime naïves : toutes les dates de session sont en UTC.
    return datetime.now(timezone.utc).replace(tzinfo=None)


def create_session(db: Session, user_id: int, ttl: timedelta) -> str:
    """Crée une session pour l'utilisateur et retourne son identifiant opaque."""
    sid = secrets.token_urlsafe(SESSION_ID_BYTES)
    db.add(UserSession(sid=sid, sess={"user_id": user_id}, expire=_utcnow() + ttl))
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec de création de session pour l'utilisateur %s : %s", user_id, exc, exc_info=True)
        raise PersistenceError()
    return sid


def get_session(db: Session, sid: str) -> Optional[dict]:
    """
    Retourne le payload de la session, ou None si elle est inconnue ou expirée.
    Une session expirée rencontrée ici est supprimée immédiatement.
    """
    record = db.get(UserSession, sid)
    if record is None:
        return None
    if record.expire <= _utcnow():
        destroy_session(db, sid)
        return None
    return record.sess


def destroy_session(db: Session, sid: str) -> None:
    """Supprime la session. Sans effet si elle n'existe pas."""
    try:
        db.execute(delete(UserSession).where(UserSession.sid == sid))
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec de suppression de session : %s", exc, exc_info=True)
        raise PersistenceError()


def purge_expired_sessions(db: Session) -> int:
    """Supprime toutes les sessions expirées. Retourne le nombre de lignes supprimées."""
    result = db.execute(delete(UserSession).where(UserSession.expire <= _utcnow()))
    db.commit()
    return result.rowcount or 0
