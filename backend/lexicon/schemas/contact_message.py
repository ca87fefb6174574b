"""
Schémas Pydantic pour les messages de contact.
"""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from lexicon.schemas.common import CamelModel, not_blank, optional_not_blank, valid_email


class ContactMessageCreate(CamelModel):
    """Corps de POST /api/contact. isRead démarre toujours à false, côté serveur."""
    name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str

    @field_validator("name", "subject", "message")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("phone")
    @classmethod
    def phone_not_empty(cls, v: Optional[str]) -> Optional[str]:
        return optional_not_blank(v)

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str) -> str:
        return valid_email(v)


class ContactMessageResponse(CamelModel):
    id: int
    name: str
    email: str
    phone: Optional[str]
    subject: str
    message: str
    is_read: bool
    created_at: datetime
