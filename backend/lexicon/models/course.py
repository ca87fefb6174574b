"""
Modèle SQLAlchemy pour le catalogue de cours.
Jamais supprimé : is_active masque le cours de la liste publique.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, Text, func, true

from lexicon.database import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    duration = Column(Text, nullable=False)
    batch_size = Column(Text, nullable=False)
    target_grade = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at = Column(DateTime, nullable=False, server_default=func.now())
