"""
Tests unitaires pour le service des inscriptions.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from lexicon.errors import PersistenceError
from lexicon.models.enrollment import Enrollment
from lexicon.schemas.enrollment import EnrollmentCreate
from lexicon.services.enrollment_service import create_enrollment, get_enrollment, get_enrollments

from conftest import SAMPLE_ENROLLMENT


def make_enrollment(**overrides) -> EnrollmentCreate:
    return EnrollmentCreate.model_validate({**SAMPLE_ENROLLMENT, **overrides})


# --- create_enrollment ---

def test_create_enrollment_succes(db_session):
    enrollment = create_enrollment(db_session, make_enrollment())

    assert enrollment.id is not None
    assert enrollment.created_at is not None
    assert enrollment.name == "Asha"
    assert enrollment.grade == "10"
    assert enrollment.email == "asha@example.com"
    assert enrollment.phone == "9999999999"
    assert enrollment.course == "ICSE English Language"
    assert enrollment.time_slot == "Morning (9:00 AM - 11:00 AM)"


def test_create_enrollment_ids_uniques(db_session):
    ids = {create_enrollment(db_session, make_enrollment(name=f"Eleve {i}")).id for i in range(5)}
    assert len(ids) == 5


def test_create_enrollment_echec_bdd():
    db = MagicMock()
    db.commit.side_effect = OperationalError("INSERT", None, Exception("connection refused"))

    with pytest.raises(PersistenceError):
        create_enrollment(db, make_enrollment())

    db.rollback.assert_called_once()
    db.refresh.assert_not_called()


def test_create_enrollment_echec_rien_persiste(db_session, monkeypatch):
    """Un commit en échec ne laisse aucune ligne derrière lui."""
    def failing_commit():
        raise OperationalError("INSERT", None, Exception("disk full"))

    monkeypatch.setattr(db_session, "commit", failing_commit)
    with pytest.raises(PersistenceError):
        create_enrollment(db_session, make_enrollment())
    monkeypatch.undo()

    count = db_session.execute(select(func.count()).select_from(Enrollment)).scalar()
    assert count == 0


# --- get_enrollments ---

def test_get_enrollments_vide(db_session):
    assert get_enrollments(db_session) == []


def test_get_enrollments_plus_recent_en_premier(db_session):
    created = [create_enrollment(db_session, make_enrollment(name=f"Eleve {i}")) for i in range(4)]

    result = get_enrollments(db_session)

    assert len(result) == 4
    assert [e.id for e in result] == [e.id for e in reversed(created)]
    dates = [e.created_at for e in result]
    assert dates == sorted(dates, reverse=True)


# --- get_enrollment ---

def test_get_enrollment_existante(db_session):
    created = create_enrollment(db_session, make_enrollment())
    assert get_enrollment(db_session, created.id).name == "Asha"


def test_get_enrollment_inexistante(db_session):
    assert get_enrollment(db_session, 999) is None
