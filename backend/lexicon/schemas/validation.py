"""
Validation explicite d'un payload non fiable contre un schéma d'insertion.

Utilisé quand le corps de requête doit être lu après un contrôle préalable
(ex. routes admin : la session est vérifiée avant toute lecture du body).
"""

import json
from typing import Any, Type, TypeVar

import pydantic
from pydantic import BaseModel

from lexicon.errors import ValidationError

M = TypeVar("M", bound=BaseModel)


def parse_insert(model: Type[M], raw: Any) -> M:
    """
    Retourne `raw` validé et normalisé par `model`.
    Lève ValidationError avec la liste des problèmes champ par champ.
    Fonction pure : aucun effet de bord.
    """
    if not isinstance(raw, dict):
        raise ValidationError(["body: expected a JSON object"])
    try:
        return model.model_validate(raw)
    except pydantic.ValidationError as exc:
        raise ValidationError.from_pydantic(exc.errors()) from exc


def parse_json_body(body: bytes) -> Any:
    """Décode un corps JSON brut ; un corps vide ou mal formé est une erreur de validation."""
    if not body:
        raise ValidationError(["body: request body is required"])
    try:
        return json.loads(body)
    except ValueError as exc:
        raise ValidationError(["body: invalid JSON"]) from exc
