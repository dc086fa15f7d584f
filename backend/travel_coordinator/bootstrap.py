"""
Création de la table trips si elle n'existe pas encore.

Hors du chemin des requêtes : à lancer une fois par environnement.
    python -m travel_coordinator.bootstrap
Idempotent (CREATE TABLE IF NOT EXISTS via checkfirst).
"""

import logging

import travel_coordinator.models  # noqa: F401  enregistre les modèles dans Base.metadata
from travel_coordinator.config import settings
from travel_coordinator.database import Base, engine
from travel_coordinator.logging_config import setup_logging

logger = logging.getLogger(__name__)


def ensure_schema(bind=None) -> None:
    """Crée les tables manquantes sur `bind` (le moteur de l'application par défaut)."""
    Base.metadata.create_all(bind=bind if bind is not None else engine, checkfirst=True)
    logger.info("Schéma prêt : %s", ", ".join(sorted(Base.metadata.tables)))


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    ensure_schema()
