"""
Service métier pour les demandes d'inscription.
Créées par le formulaire public, en lecture seule ensuite.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lexicon.errors import PersistenceError
from lexicon.models.enrollment import Enrollment
from lexicon.schemas.enrollment import EnrollmentCreate

logger = logging.getLogger(__name__)


def create_enrollment(db: Session, data: EnrollmentCreate) -> Enrollment:
    """Insère la demande en une transaction ; id et created_at sont attribués par la base."""
    enrollment = Enrollment(**data.model_dump())
    db.add(enrollment)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec d'enregistrement d'une inscription : %s", exc, exc_info=True)
        raise PersistenceError()
    db.refresh(enrollment)
    logger.info("Inscription reçue : %s (%s)", enrollment.id, enrollment.course)
    return enrollment


def get_enrollments(db: Session) -> list[Enrollment]:
    """Retourne toutes les inscriptions, de la plus récente à la plus ancienne."""
    return db.execute(
        select(Enrollment).order_by(Enrollment.created_at.desc(), Enrollment.id.desc())
    ).scalars().all()


def get_enrollment(db: Session, enrollment_id: int) -> Optional[Enrollment]:
    """Retourne une inscription par son ID, ou None si inexistante."""
    return db.get(Enrollment, enrollment_id)
