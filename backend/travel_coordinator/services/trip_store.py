"""
Accès à la table trips : une seule requête SQL par opération.

- Aucune validation ici : le store écrit ce qu'on lui donne.
- delete_trip et append_traveler sur un ID inexistant ne font rien (pas d'erreur).
- Toute erreur SQLAlchemy → rollback, log du détail, PersistenceError.
"""

import datetime as dt
import logging

from sqlalchemy import bindparam, delete, select, update
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from travel_coordinator.exceptions import PersistenceError
from travel_coordinator.models.trip import Trip

logger = logging.getLogger(__name__)


def list_trips(db: Session) -> list[Trip]:
    """Retourne tous les voyages, par date de début croissante."""
    try:
        return list(
            db.execute(
                select(Trip).order_by(Trip.start_date.asc())
            ).scalars().all()
        )
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "lecture des voyages", exc) from exc


def create_trip(
    db: Session,
    name: str,
    city: str,
    country: str,
    start_date: dt.date,
    end_date: dt.date,
    travelers: list[dict],
) -> Trip:
    """
    Insère un voyage et le retourne tel que persisté (id et created_at générés).
    `travelers` doit déjà être sérialisable en JSON ({name, startDate, endDate}).
    """
    trip = Trip(
        name=name,
        city=city,
        country=country,
        start_date=start_date,
        end_date=end_date,
        travelers=travelers,
    )
    try:
        db.add(trip)
        db.commit()
        db.refresh(trip)
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "création du voyage", exc) from exc
    return trip


def delete_trip(db: Session, trip_id: int) -> None:
    """Supprime le voyage. Aucun effet si l'ID n'existe pas."""
    try:
        result = db.execute(delete(Trip).where(Trip.id == trip_id))
        db.commit()
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "suppression du voyage", exc) from exc
    logger.debug("DELETE trips id=%s : %s ligne(s)", trip_id, result.rowcount)


def append_traveler(db: Session, trip_id: int, traveler: dict) -> None:
    """
    Concatène [traveler] au tableau JSONB travelers (opérateur ||).

    Ajout inconditionnel : pas de contrôle d'existence du voyage, ni de doublon,
    ni de cohérence avec les dates du voyage. Aucun effet si l'ID n'existe pas.
    """
    stmt = (
        update(Trip)
        .where(Trip.id == trip_id)
        .values(travelers=Trip.travelers.op("||")(bindparam("new_travelers", [traveler], type_=JSONB)))
        .execution_options(synchronize_session=False)
    )
    try:
        result = db.execute(stmt)
        db.commit()
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "mise à jour des voyageurs", exc) from exc
    logger.debug("UPDATE trips id=%s (append traveler) : %s ligne(s)", trip_id, result.rowcount)


def _persistence_error(db: Session, action: str, exc: SQLAlchemyError) -> PersistenceError:
    """Annule la transaction en cours et journalise l'erreur d'origine."""
    db.rollback()
    logger.error("Échec BDD (%s) : %s", action, exc, exc_info=True)
    return PersistenceError(f"Échec de la {action}.")
