"""
Service métier pour les voyages.

Chaque opération = validation des entrées + un seul appel au store + normalisation
(dates YYYY-MM-DD, champs camelCase via TripResponse).

Doublons de voyageurs : non contrôlés ici. Deux join simultanés avec le même nom
produisent deux entrées identiques (ajout inconditionnel côté store).
"""

import datetime as dt
import logging
from typing import Iterable, Optional

from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from travel_coordinator.exceptions import ValidationError
from travel_coordinator.models.trip import Trip
from travel_coordinator.schemas.trip import (
    TravelerIn,
    TravelerResponse,
    TripCreate,
    TripFacets,
    TripJoin,
    TripResponse,
)
from travel_coordinator.services import trip_store

logger = logging.getLogger(__name__)

REQUIRED_TRIP_FIELDS = ("name", "city", "country", "start_date", "end_date")
REQUIRED_JOIN_FIELDS = ("name", "start_date", "end_date")


def get_trips(
    db: Session,
    traveler: Optional[str] = None,
    month: Optional[str] = None,
    country: Optional[str] = None,
) -> list[TripResponse]:
    """Retourne tous les voyages (date de début croissante), filtrés si demandé."""
    trips = [_to_response(t) for t in trip_store.list_trips(db)]
    return filter_trips(trips, traveler=traveler, month=month, country=country)


def create_trip(db: Session, data: TripCreate) -> TripResponse:
    """
    Crée un voyage.

    name, city, country, startDate et endDate sont obligatoires, et la date de
    début ne peut pas dépasser la date de fin. Les voyageurs sont acceptés tels
    quels ; ceux sans dates reprennent les dates du voyage.
    """
    _require(data, REQUIRED_TRIP_FIELDS)
    _check_range(data.start_date, data.end_date)

    travelers = [
        _traveler_document(t, data.start_date, data.end_date)
        for t in data.travelers
    ]
    trip = trip_store.create_trip(
        db,
        name=data.name,
        city=data.city,
        country=data.country,
        start_date=data.start_date,
        end_date=data.end_date,
        travelers=travelers,
    )

    logger.info(
        "Voyage créé : %s (%s, %s) id=%s, %d voyageur(s)",
        trip.name, trip.city, trip.country, trip.id, len(travelers),
    )
    return _to_response(trip)


def delete_trip(db: Session, trip_id: int) -> None:
    """Supprime un voyage. Un ID inconnu n'est pas une erreur."""
    trip_store.delete_trip(db, trip_id)
    logger.info("Suppression demandée pour le voyage %s", trip_id)


def join_trip(db: Session, trip_id: int, data: TripJoin) -> None:
    """
    Ajoute un voyageur en fin de liste.

    Pas de contrôle de doublon ni d'existence du voyage : un join sur un ID
    supprimé réussit sans effet visible.
    """
    _require(data, REQUIRED_JOIN_FIELDS)
    _check_range(data.start_date, data.end_date)

    traveler = TravelerIn(name=data.name, start_date=data.start_date, end_date=data.end_date)
    trip_store.append_traveler(db, trip_id, _traveler_document(traveler))
    logger.info("%s rejoint le voyage %s", data.name, trip_id)


def get_facets(db: Session) -> TripFacets:
    """Noms de voyageurs et pays distincts, triés (listes des filtres)."""
    trips = [_to_response(t) for t in trip_store.list_trips(db)]
    return TripFacets(
        travelers=sorted({tr.name for t in trips for tr in t.travelers if tr.name}),
        countries=sorted({t.country for t in trips}),
    )


def filter_trips(
    trips: Iterable[TripResponse],
    traveler: Optional[str] = None,
    month: Optional[str] = None,
    country: Optional[str] = None,
) -> list[TripResponse]:
    """
    Filtre une liste déjà chargée. Tous les critères fournis doivent correspondre.

    - traveler : égalité exacte avec le nom d'un voyageur
    - month    : "01".."12", comparé au mois de la date de début
    - country  : égalité exacte
    L'ordre d'entrée est conservé.
    """
    result = []
    for trip in trips:
        if traveler and not any(t.name == traveler for t in trip.travelers):
            continue
        if month and f"{trip.start_date.month:02d}" != month:
            continue
        if country and trip.country != country:
            continue
        result.append(trip)
    return result


def _require(data, fields: tuple[str, ...]) -> None:
    """Lève une ValidationError listant les champs absents ou vides."""
    missing = [to_camel(f) for f in fields if getattr(data, f) in (None, "")]
    if missing:
        raise ValidationError(f"Champs obligatoires manquants : {', '.join(missing)}.")


def _check_range(start_date: dt.date, end_date: dt.date) -> None:
    if start_date > end_date:
        raise ValidationError("La date de début doit précéder ou égaler la date de fin.")


def _traveler_document(
    traveler: TravelerIn,
    default_start: Optional[dt.date] = None,
    default_end: Optional[dt.date] = None,
) -> dict:
    """Forme stockée dans la colonne JSONB : {name, startDate, endDate} en ISO."""
    return {
        "name": traveler.name,
        "startDate": _iso(traveler.start_date or default_start),
        "endDate": _iso(traveler.end_date or default_end),
    }


def _iso(value: Optional[dt.date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _to_response(trip: Trip) -> TripResponse:
    """Construit le schéma de réponse (dates normalisées, voyageurs dans l'ordre d'arrivée)."""
    return TripResponse(
        id=trip.id,
        name=trip.name,
        city=trip.city,
        country=trip.country,
        start_date=trip.start_date,
        end_date=trip.end_date,
        travelers=[TravelerResponse.model_validate(t) for t in (trip.travelers or [])],
        created_at=trip.created_at,
    )
