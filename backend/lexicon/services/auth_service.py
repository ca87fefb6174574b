"""
Service d'authentification : inscription et vérification des identifiants.

Un utilisateur inconnu et un mauvais mot de passe produisent exactement la
même erreur, pour ne pas révéler quels comptes existent.
"""

import logging

from sqlalchemy.orm import Session

from lexicon.errors import AuthenticationError, DuplicateError
from lexicon.models.user import User
from lexicon.schemas.user import UserCreate
from lexicon.security import dummy_verify, hash_password, verify_password
from lexicon.services import user_service

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


def register(db: Session, data: UserCreate) -> User:
    """
    Crée un compte après vérification des doublons.

    Étapes :
    1. Refuser si le username existe déjà
    2. Refuser si l'email existe déjà
    3. Hacher le mot de passe et insérer (is_admin = False)

    La vérification 1-2 n'est pas atomique avec l'insertion : deux inscriptions
    concurrentes sont départagées par les contraintes UNIQUE (DuplicateError aussi).
    """
    if user_service.get_user_by_username(db, data.username) is not None:
        raise DuplicateError("Username already exists")
    if user_service.get_user_by_email(db, data.email) is not None:
        raise DuplicateError("Email already registered")

    user = user_service.create_user(
        db,
        username=data.username,
        email=data.email,
        password_hash=hash_password(data.password),
    )
    logger.info("Compte créé : %s (%s)", user.username, user.id)
    return user


def authenticate(db: Session, username: str, password: str) -> User:
    """Retourne l'utilisateur si les identifiants sont valides, sinon lève AuthenticationError."""
    user = user_service.get_user_by_username(db, username)
    if user is None:
        dummy_verify(password)
        logger.info("Échec de connexion pour %s", username)
        raise AuthenticationError(INVALID_CREDENTIALS)

    if not verify_password(password, user.password_hash):
        logger.info("Échec de connexion pour %s", username)
        raise AuthenticationError(INVALID_CREDENTIALS)

    return user
