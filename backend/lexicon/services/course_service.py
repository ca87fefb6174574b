"""
Service métier pour le catalogue de cours.
Création et mise à jour réservées à l'admin ; aucune suppression physique.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lexicon.errors import PersistenceError
from lexicon.models.course import Course
from lexicon.schemas.course import CourseCreate, CourseUpdate

logger = logging.getLogger(__name__)

# Catalogue proposé par l'académie, inséré au premier démarrage sur une base vide.
DEFAULT_COURSES = [
    {
        "title": "ICSE English Language",
        "description": "Comprehensive preparation for the ICSE English Language paper: composition, letter writing, comprehension and grammar.",
        "duration": "1 year",
        "batch_size": "8-10 students",
        "target_grade": "Grades 9-10",
    },
    {
        "title": "ISC English Language",
        "description": "Advanced language skills for the ISC board: argumentative writing, proposals and directed writing.",
        "duration": "1 year",
        "batch_size": "8-10 students",
        "target_grade": "Grades 11-12",
    },
    {
        "title": "ICSE/ISC Literature",
        "description": "Close reading of prescribed prose, poetry and drama with answer-writing practice.",
        "duration": "1 year",
        "batch_size": "8-10 students",
        "target_grade": "Grades 9-12",
    },
    {
        "title": "Vocabulary Building",
        "description": "Systematic word study, roots and usage to build a rich and precise vocabulary.",
        "duration": "3 months",
        "batch_size": "10-12 students",
        "target_grade": "Grades 5-12",
    },
    {
        "title": "Grammar Enhancement",
        "description": "Structured revision of English grammar from fundamentals to advanced usage.",
        "duration": "3 months",
        "batch_size": "10-12 students",
        "target_grade": "Grades 5-10",
    },
    {
        "title": "Public Speaking",
        "description": "Confidence, elocution and debate skills through guided practice.",
        "duration": "2 months",
        "batch_size": "8-10 students",
        "target_grade": "Grades 5-12",
    },
]


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec %s d'un cours : %s", action, exc, exc_info=True)
        raise PersistenceError()


def create_course(db: Session, data: CourseCreate) -> Course:
    """Crée un cours, actif par défaut."""
    course = Course(**data.model_dump(), is_active=True)
    db.add(course)
    _commit(db, "de création")
    db.refresh(course)
    logger.info("Cours créé : %s (%s)", course.title, course.id)
    return course


def get_courses(db: Session, active_only: bool = False) -> list[Course]:
    """Retourne les cours du plus récent au plus ancien ; active_only pour la liste publique."""
    query = select(Course)
    if active_only:
        query = query.where(Course.is_active.is_(True))
    return db.execute(
        query.order_by(Course.created_at.desc(), Course.id.desc())
    ).scalars().all()


def get_course(db: Session, course_id: int) -> Optional[Course]:
    """Retourne un cours par son ID, ou None si inexistant."""
    return db.get(Course, course_id)


def update_course(db: Session, course_id: int, data: CourseUpdate) -> Optional[Course]:
    """Met à jour les champs fournis d'un cours. Retourne None si le cours n'existe pas."""
    course = db.get(Course, course_id)
    if course is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(course, field, value)

    _commit(db, "de mise à jour")
    db.refresh(course)
    return course


def seed_default_courses(db: Session) -> int:
    """
    Insère le catalogue par défaut si la table est vide.
    Retourne le nombre de cours créés (0 si le catalogue existe déjà).
    """
    count = db.execute(select(func.count()).select_from(Course)).scalar() or 0
    if count:
        return 0

    for raw in DEFAULT_COURSES:
        db.add(Course(**CourseCreate(**raw).model_dump(), is_active=True))
    _commit(db, "d'initialisation")
    logger.info("Catalogue initialisé : %d cours", len(DEFAULT_COURSES))
    return len(DEFAULT_COURSES)
