"""
Configuration minimale du logger racine.

Appelée une seule fois au démarrage de l'API (et par le script de bootstrap).
Les modules se contentent de logging.getLogger(__name__).
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Attache un handler console au logger racine s'il n'en a pas encore.
    Un niveau inconnu retombe sur INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        # Déjà configuré (uvicorn, pytest, second appel)
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
