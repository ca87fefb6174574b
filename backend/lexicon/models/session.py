"""
Table des sessions d'authentification.
Espace de noms distinct des entités métier : sid opaque → payload JSON + expiration.
"""

from sqlalchemy import JSON, Column, DateTime, String

from lexicon.database import Base


class UserSession(Base):
    __tablename__ = "user_sessions"

    sid = Column(String(128), primary_key=True)
    sess = Column(JSON, nullable=False)  # {"user_id": <int>}
    expire = Column(DateTime, nullable=False, index=True)
