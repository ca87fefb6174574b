"""
Schémas Pydantic pour le catalogue de cours.
"""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from lexicon.schemas.common import CamelModel, not_blank


class CourseCreate(CamelModel):
    """Création d'un cours. isActive n'est pas accepté : un nouveau cours est toujours actif."""
    title: str
    description: str
    duration: str
    batch_size: str
    target_grade: str

    @field_validator("title", "description", "duration", "batch_size", "target_grade")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return not_blank(v)


class CourseUpdate(CamelModel):
    """Mise à jour partielle : seuls les champs fournis sont modifiés."""
    title: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[str] = None
    batch_size: Optional[str] = None
    target_grade: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("title", "description", "duration", "batch_size", "target_grade")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> str:
        # Les colonnes sont NOT NULL : un null explicite est refusé.
        if v is None:
            raise ValueError("must not be null")
        return not_blank(v)

    @field_validator("is_active")
    @classmethod
    def not_null(cls, v: Optional[bool]) -> bool:
        if v is None:
            raise ValueError("must not be null")
        return v


class CourseResponse(CamelModel):
    id: int
    title: str
    description: str
    duration: str
    batch_size: str
    target_grade: str
    is_active: bool
    created_at: datetime
