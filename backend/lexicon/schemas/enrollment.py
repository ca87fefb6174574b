"""
Schémas Pydantic pour les demandes d'inscription.
"""

from datetime import datetime

from pydantic import Field, field_validator

from lexicon.schemas.common import CamelModel, not_blank, valid_email

# Longueur de la colonne enrollments.grade (varchar).
GRADE_MAX_LENGTH = 10


class EnrollmentCreate(CamelModel):
    """Corps de POST /api/enrollments. id et createdAt sont attribués par le serveur."""
    name: str
    grade: str = Field(max_length=GRADE_MAX_LENGTH)
    email: str
    phone: str
    course: str
    time_slot: str

    @field_validator("name", "grade", "phone", "course", "time_slot")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str) -> str:
        return valid_email(v)


class EnrollmentResponse(CamelModel):
    id: int
    name: str
    grade: str
    email: str
    phone: str
    course: str
    time_slot: str
    created_at: datetime
