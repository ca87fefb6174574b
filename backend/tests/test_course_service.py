"""
Tests unitaires pour le service du catalogue de cours.
"""

from lexicon.schemas.course import CourseCreate, CourseUpdate
from lexicon.services.course_service import (
    DEFAULT_COURSES,
    create_course,
    get_course,
    get_courses,
    seed_default_courses,
    update_course,
)

from conftest import SAMPLE_COURSE


def make_course(**overrides) -> CourseCreate:
    return CourseCreate.model_validate({**SAMPLE_COURSE, **overrides})


def test_create_course_actif_par_defaut(db_session):
    course = create_course(db_session, make_course())
    assert course.id is not None
    assert course.is_active is True
    assert course.batch_size == "8-10 students"


def test_get_courses_filtre_actifs(db_session):
    visible = create_course(db_session, make_course(title="Visible"))
    hidden = create_course(db_session, make_course(title="Masqué"))
    update_course(db_session, hidden.id, CourseUpdate(is_active=False))

    assert [c.id for c in get_courses(db_session, active_only=True)] == [visible.id]
    assert {c.id for c in get_courses(db_session)} == {visible.id, hidden.id}


def test_get_courses_plus_recent_en_premier(db_session):
    first = create_course(db_session, make_course(title="A"))
    second = create_course(db_session, make_course(title="B"))
    assert [c.id for c in get_courses(db_session)] == [second.id, first.id]


def test_update_course_partiel(db_session):
    course = create_course(db_session, make_course())

    updated = update_course(db_session, course.id, CourseUpdate.model_validate({"duration": "6 months"}))

    assert updated.duration == "6 months"
    assert updated.title == "Creative Writing"
    assert updated.is_active is True


def test_update_course_inexistant(db_session):
    assert update_course(db_session, 999, CourseUpdate(title="X")) is None


def test_get_course_inexistant(db_session):
    assert get_course(db_session, 999) is None


def test_seed_default_courses_base_vide(db_session):
    assert seed_default_courses(db_session) == len(DEFAULT_COURSES)
    titles = {c.title for c in get_courses(db_session, active_only=True)}
    assert "ICSE English Language" in titles
    assert "Public Speaking" in titles


def test_seed_default_courses_une_seule_fois(db_session):
    seed_default_courses(db_session)
    assert seed_default_courses(db_session) == 0
    assert len(get_courses(db_session)) == len(DEFAULT_COURSES)


def test_seed_default_courses_catalogue_existant(db_session):
    create_course(db_session, make_course())
    assert seed_default_courses(db_session) == 0
