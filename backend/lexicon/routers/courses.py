"""
Router pour le catalogue de cours.

GET /api/courses est public (cours actifs uniquement). Les routes d'écriture
vérifient la session avant de lire le corps de la requête : une requête non
authentifiée reçoit 401 quel que soit son contenu.
"""

from typing import Any, List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from lexicon.database import get_db
from lexicon.dependencies import require_admin
from lexicon.errors import NotFoundError
from lexicon.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from lexicon.schemas.validation import parse_insert, parse_json_body
from lexicon.services import course_service

router = APIRouter(prefix="/api/courses", tags=["Cours"])


async def json_body(request: Request) -> Any:
    """
    Corps JSON brut, lu dans une dépendance : les dépendances de route
    (contrôle de session) sont résolues avant, le handler reste synchrone.
    """
    return parse_json_body(await request.body())


@router.get("", response_model=List[CourseResponse], summary="Lister les cours actifs")
def list_active_courses(db: Session = Depends(get_db)):
    return course_service.get_courses(db, active_only=True)


@router.get(
    "/all",
    response_model=List[CourseResponse],
    dependencies=[Depends(require_admin)],
    summary="Lister tous les cours",
)
def list_all_courses(db: Session = Depends(get_db)):
    """Inclut les cours désactivés."""
    return course_service.get_courses(db)


@router.get(
    "/{course_id}",
    response_model=CourseResponse,
    dependencies=[Depends(require_admin)],
    summary="Détail d'un cours",
)
def get_course(course_id: int, db: Session = Depends(get_db)):
    course = course_service.get_course(db, course_id)
    if course is None:
        raise NotFoundError("Course not found")
    return course


@router.post(
    "",
    response_model=CourseResponse,
    dependencies=[Depends(require_admin)],
    summary="Créer un cours",
)
def create_course(raw: Any = Depends(json_body), db: Session = Depends(get_db)):
    data = parse_insert(CourseCreate, raw)
    return course_service.create_course(db, data)


@router.patch(
    "/{course_id}",
    response_model=CourseResponse,
    dependencies=[Depends(require_admin)],
    summary="Modifier un cours",
)
def update_course(course_id: int, raw: Any = Depends(json_body), db: Session = Depends(get_db)):
    """Mise à jour partielle ; isActive permet de masquer un cours sans le supprimer."""
    data = parse_insert(CourseUpdate, raw)
    course = course_service.update_course(db, course_id, data)
    if course is None:
        raise NotFoundError("Course not found")
    return course
