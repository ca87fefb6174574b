"""
Router pour les demandes d'inscription.
POST public (formulaire du site), lecture réservée au tableau de bord.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lexicon.database import get_db
from lexicon.dependencies import require_admin
from lexicon.errors import NotFoundError
from lexicon.schemas.enrollment import EnrollmentCreate, EnrollmentResponse
from lexicon.services import enrollment_service

router = APIRouter(prefix="/api/enrollments", tags=["Inscriptions"])


@router.post("", response_model=EnrollmentResponse, summary="Envoyer une demande d'inscription")
def create_enrollment(data: EnrollmentCreate, db: Session = Depends(get_db)):
    """Enregistre une demande d'inscription. Aucune authentification requise."""
    return enrollment_service.create_enrollment(db, data)


@router.get(
    "",
    response_model=List[EnrollmentResponse],
    dependencies=[Depends(require_admin)],
    summary="Lister les inscriptions",
)
def list_enrollments(db: Session = Depends(get_db)):
    """Retourne toutes les inscriptions, de la plus récente à la plus ancienne."""
    return enrollment_service.get_enrollments(db)


@router.get(
    "/{enrollment_id}",
    response_model=EnrollmentResponse,
    dependencies=[Depends(require_admin)],
    summary="Détail d'une inscription",
)
def get_enrollment(enrollment_id: int, db: Session = Depends(get_db)):
    enrollment = enrollment_service.get_enrollment(db, enrollment_id)
    if enrollment is None:
        raise NotFoundError("Enrollment not found")
    return enrollment
