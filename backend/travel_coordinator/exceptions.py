"""
Exceptions métier du coordinateur de voyages.

- ValidationError : champ obligatoire manquant ou plage de dates inversée.
  Levée par le service avant tout appel au store (aucun effet de bord).
- PersistenceError : échec de connexion ou de contrainte côté base.
  Levée par le store après rollback ; le détail technique est journalisé,
  jamais renvoyé au client.
"""


class TravelCoordinatorError(Exception):
    """Exception de base de l'application."""


class ValidationError(TravelCoordinatorError, ValueError):
    """Entrée invalide détectée par le service."""


class PersistenceError(TravelCoordinatorError):
    """Échec d'une opération sur la table trips."""
