"""
Briques communes aux schémas Pydantic : format JSON camelCase et règles de champ partagées.
"""

import re
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")


class CamelModel(BaseModel):
    """
    Base des schémas exposés au front : champs snake_case côté Python,
    camelCase sur le fil (timeSlot, isRead, createdAt...).
    Les deux formes sont acceptées en entrée ; les champs inconnus sont ignorés.
    """
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "from_attributes": True,
    }


def not_blank(v: str) -> str:
    # Refusé si vide après trim, mais conservé tel que saisi.
    if not v.strip():
        raise ValueError("must not be empty")
    return v


def optional_not_blank(v: Optional[str]) -> Optional[str]:
    """Absent = valide ; présent = même règle que not_blank."""
    if v is None:
        return v
    return not_blank(v)


def valid_email(v: str) -> str:
    # Pas de normalisation de casse : l'adresse est conservée telle que saisie.
    v = not_blank(v)
    if not EMAIL_REGEX.match(v):
        raise ValueError("must be a valid email address")
    return v


class SuccessResponse(BaseModel):
    success: bool = True
