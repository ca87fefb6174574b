"""
Service métier pour les messages de contact.
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lexicon.errors import PersistenceError
from lexicon.models.contact_message import ContactMessage
from lexicon.schemas.contact_message import ContactMessageCreate

logger = logging.getLogger(__name__)


def create_contact_message(db: Session, data: ContactMessageCreate) -> ContactMessage:
    message = ContactMessage(**data.model_dump(), is_read=False)
    db.add(message)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec d'enregistrement d'un message de contact : %s", exc, exc_info=True)
        raise PersistenceError()
    db.refresh(message)
    logger.info("Message de contact reçu : %s", message.id)
    return message


def get_contact_messages(db: Session) -> list[ContactMessage]:
    """Retourne tous les messages, du plus récent au plus ancien."""
    return db.execute(
        select(ContactMessage).order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc())
    ).scalars().all()


def mark_message_read(db: Session, message_id: int) -> None:
    """
    Passe is_read à True. Idempotent : aucun effet si déjà lu ou si l'ID n'existe pas.
    L'appelant qui a besoin de l'existence doit la vérifier séparément.
    """
    try:
        db.execute(
            update(ContactMessage)
            .where(ContactMessage.id == message_id)
            .values(is_read=True)
        )
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec du marquage du message %s : %s", message_id, exc, exc_info=True)
        raise PersistenceError()
