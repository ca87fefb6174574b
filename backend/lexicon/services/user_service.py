"""
Accès aux utilisateurs.
Les recherches par username / email sont exactes et sensibles à la casse.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from lexicon.errors import DuplicateError, PersistenceError
from lexicon.models.user import User

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.execute(
        select(User).where(User.username == username)
    ).scalar_one_or_none()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.execute(
        select(User).where(User.email == email)
    ).scalar_one_or_none()


def create_user(db: Session, username: str, email: str, password_hash: str) -> User:
    """
    Insère un utilisateur (is_admin = False).
    Lève DuplicateError si la contrainte d'unicité username/email est violée.
    """
    user = User(username=username, email=email, password_hash=password_hash, is_admin=False)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateError("Username or email already exists")
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec de création de l'utilisateur %s : %s", username, exc, exc_info=True)
        raise PersistenceError()
    db.refresh(user)
    return user
