"""
Router pour les messages du formulaire de contact.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lexicon.database import get_db
from lexicon.dependencies import require_admin
from lexicon.schemas.common import SuccessResponse
from lexicon.schemas.contact_message import ContactMessageCreate, ContactMessageResponse
from lexicon.services import contact_service

router = APIRouter(prefix="/api/contact", tags=["Contact"])


@router.post("", response_model=ContactMessageResponse, summary="Envoyer un message")
def create_contact_message(data: ContactMessageCreate, db: Session = Depends(get_db)):
    """Enregistre un message de contact, non lu. Aucune authentification requise."""
    return contact_service.create_contact_message(db, data)


@router.get(
    "",
    response_model=List[ContactMessageResponse],
    dependencies=[Depends(require_admin)],
    summary="Lister les messages",
)
def list_contact_messages(db: Session = Depends(get_db)):
    """Retourne tous les messages, du plus récent au plus ancien."""
    return contact_service.get_contact_messages(db)


@router.patch(
    "/{message_id}/read",
    response_model=SuccessResponse,
    dependencies=[Depends(require_admin)],
    summary="Marquer un message comme lu",
)
def mark_message_read(message_id: int, db: Session = Depends(get_db)):
    """Idempotent : renvoie success même si le message était déjà lu ou n'existe pas."""
    contact_service.mark_message_read(db, message_id)
    return SuccessResponse()
