"""
Modèle SQLAlchemy pour les utilisateurs (comptes d'accès au tableau de bord).
Le mot de passe n'est stocké que sous forme de hash salé.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, false, func

from lexicon.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    email = Column(Text, unique=True, nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime, nullable=False, server_default=func.now())
