"""
Modèle SQLAlchemy pour les demandes d'inscription envoyées depuis le site public.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from lexicon.database import Base


class Enrollment(Base):
    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    grade = Column(String(10), nullable=False)
    email = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    course = Column(Text, nullable=False)  # titre d'un cours du catalogue (non contraint)
    time_slot = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)
