"""
Connexion à la base de données relationnelle (PostgreSQL en production, SQLite en test).

Le handle `Database` est construit une seule fois par `create_app` puis stocké
dans `app.state` : aucun moteur global au niveau du module.
"""

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


class Database:
    """Moteur SQLAlchemy + fabrique de sessions pour une URL donnée."""

    def __init__(self, url: str):
        engine_kwargs = {}
        if url.startswith("sqlite"):
            # Une base SQLite en mémoire n'existe que sur sa connexion : on la partage entre threads.
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        """Crée les tables manquantes (les modèles doivent être importés avant)."""
        # Enregistre tous les modèles dans Base.metadata.
        import lexicon.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request):
    """Dépendance FastAPI : fournit une session BDD et la ferme après usage."""
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
