"""
Schémas Pydantic pour l'inscription, la connexion et la représentation publique d'un utilisateur.
Le hash du mot de passe n'apparaît dans aucun schéma de réponse.
"""

from datetime import datetime

from pydantic import field_validator

from lexicon.schemas.common import CamelModel, not_blank, valid_email


class UserCreate(CamelModel):
    """Corps de POST /api/auth/register. isAdmin est ignoré s'il est envoyé."""
    username: str
    email: str
    password: str

    @field_validator("username")
    @classmethod
    def username_not_empty(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str) -> str:
        return valid_email(v)

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        # Vérifié après trim, mais conservé tel quel.
        if not v.strip():
            raise ValueError("must not be empty")
        return v


class LoginRequest(CamelModel):
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def username_not_empty(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v


class UserResponse(CamelModel):
    id: int
    username: str
    email: str
    is_admin: bool
    created_at: datetime
