"""
Tests unitaires pour l'authentification : hachage, inscription, vérification des identifiants.
"""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import IntegrityError

from lexicon.errors import AuthenticationError, DuplicateError
from lexicon.schemas.user import UserCreate
from lexicon.security import hash_password, verify_password
from lexicon.services.auth_service import INVALID_CREDENTIALS, authenticate, register
from lexicon.services.user_service import create_user, get_user_by_email, get_user_by_username


def make_user(**overrides) -> UserCreate:
    values = {"username": "asha", "email": "asha@example.com", "password": "correct-horse"}
    values.update(overrides)
    return UserCreate(**values)


# --- security ---

def test_hash_password_sale():
    first = hash_password("secret")
    second = hash_password("secret")
    assert first != "secret"
    assert first != second
    assert verify_password("secret", first)
    assert verify_password("secret", second)


def test_verify_password_incorrect():
    assert not verify_password("wrong", hash_password("secret"))


def test_verify_password_hash_illisible():
    assert verify_password("secret", "not-a-hash") is False


# --- register ---

def test_register_succes(db_session):
    user = register(db_session, make_user())

    assert user.id is not None
    assert user.is_admin is False
    assert user.password_hash != "correct-horse"
    assert verify_password("correct-horse", user.password_hash)


def test_register_username_duplique(db_session):
    first = register(db_session, make_user())

    with pytest.raises(DuplicateError, match="Username"):
        register(db_session, make_user(email="other@example.com"))

    assert get_user_by_username(db_session, "asha").id == first.id
    assert get_user_by_email(db_session, "other@example.com") is None


def test_register_email_duplique(db_session):
    register(db_session, make_user())
    with pytest.raises(DuplicateError, match="Email"):
        register(db_session, make_user(username="asha2"))


def test_create_user_contrainte_unique_base():
    """Course entre deux inscriptions : la contrainte UNIQUE tranche."""
    db = MagicMock()
    db.commit.side_effect = IntegrityError("duplicate", None, None)
    with pytest.raises(DuplicateError):
        create_user(db, "asha", "asha@example.com", "hash")
    db.rollback.assert_called_once()


def test_recherche_sensible_a_la_casse(db_session):
    register(db_session, make_user())
    assert get_user_by_username(db_session, "ASHA") is None
    assert get_user_by_email(db_session, "ASHA@example.com") is None


# --- authenticate ---

def test_authenticate_succes(db_session):
    created = register(db_session, make_user())
    assert authenticate(db_session, "asha", "correct-horse").id == created.id


def test_authenticate_mauvais_mot_de_passe(db_session):
    register(db_session, make_user())
    with pytest.raises(AuthenticationError) as exc_info:
        authenticate(db_session, "asha", "wrong")
    assert exc_info.value.message == INVALID_CREDENTIALS


def test_authenticate_utilisateur_inconnu_meme_erreur(db_session):
    with pytest.raises(AuthenticationError) as exc_info:
        authenticate(db_session, "ghost", "whatever")
    assert exc_info.value.message == INVALID_CREDENTIALS


def test_authenticate_utilisateur_inconnu_verifie_quand_meme(db_session):
    with patch("lexicon.services.auth_service.dummy_verify") as mock_dummy:
        with pytest.raises(AuthenticationError):
            authenticate(db_session, "ghost", "whatever")
    mock_dummy.assert_called_once_with("whatever")
