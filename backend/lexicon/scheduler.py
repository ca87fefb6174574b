"""
Planificateur APScheduler pour la purge des sessions expirées.

Le job s'exécute toutes les SESSION_PURGE_INTERVAL_MINUTES et supprime les
lignes de user_sessions dont l'expiration est dépassée. Les lectures ignorent
déjà ces sessions : la purge ne fait que borner la taille de la table.
"""

import logging

from apscheduler.schedulers.background import BackgroundScheduler

from lexicon.database import Database

logger = logging.getLogger(__name__)


def _purge_expired_sessions(database: Database) -> None:
    """
    Tâche planifiée : une session BDD dédiée, fermée après usage.
    Import local pour éviter les imports circulaires.
    """
    from lexicon.services.session_service import purge_expired_sessions

    db = database.SessionLocal()
    try:
        removed = purge_expired_sessions(db)
        if removed:
            logger.info("Sessions expirées purgées : %d", removed)
    except Exception as exc:
        db.rollback()
        logger.error("Erreur lors de la purge des sessions : %s", exc)
    finally:
        db.close()


def start_scheduler(database: Database, interval_minutes: int) -> BackgroundScheduler:
    """Démarre le planificateur en arrière-plan (appelé au démarrage de l'API)."""
    scheduler = BackgroundScheduler()
    scheduler.add_job(
        _purge_expired_sessions,
        trigger="interval",
        minutes=interval_minutes,
        args=[database],
        id="purge_expired_sessions",
        replace_existing=True,
    )
    scheduler.start()
    logger.info("Scheduler démarré, purge des sessions toutes les %d minutes.", interval_minutes)
    return scheduler


def stop_scheduler(scheduler: BackgroundScheduler) -> None:
    """Arrête le planificateur proprement (appelé à l'arrêt de l'API)."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler arrêté.")
