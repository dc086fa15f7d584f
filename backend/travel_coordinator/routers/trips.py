"""
Router pour les voyages.
Liste (avec filtres), création, suppression et ajout d'un voyageur (join).

Codes retournés :
- ValidationError  → 400 avec le message de validation
- PersistenceError → 500 avec un message fixe par opération (détail en log)
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from travel_coordinator.database import get_db
from travel_coordinator.exceptions import PersistenceError, ValidationError
from travel_coordinator.schemas.trip import (
    MessageResponse,
    TripCreate,
    TripFacets,
    TripJoin,
    TripResponse,
)
from travel_coordinator.services import trip_service

router = APIRouter(prefix="/api/trips", tags=["Voyages"])

LIST_FAILED = "Impossible de récupérer les voyages."
CREATE_FAILED = "Impossible de créer le voyage."
DELETE_FAILED = "Impossible de supprimer le voyage."
JOIN_FAILED = "Impossible de rejoindre le voyage."


@router.get("", response_model=List[TripResponse], summary="Lister les voyages")
def list_trips(
    traveler: Optional[str] = Query(None, description="Nom exact d'un voyageur"),
    month: Optional[str] = Query(None, pattern=r"^(0[1-9]|1[0-2])$", description="Mois de départ (01-12)"),
    country: Optional[str] = Query(None, description="Pays exact"),
    db: Session = Depends(get_db),
):
    """Retourne les voyages par date de début croissante, filtrés par voyageur, mois ou pays."""
    try:
        return trip_service.get_trips(db, traveler=traveler, month=month, country=country)
    except PersistenceError:
        raise HTTPException(status_code=500, detail=LIST_FAILED)


@router.get("/facets", response_model=TripFacets, summary="Valeurs des filtres")
def get_facets(db: Session = Depends(get_db)):
    """Voyageurs et pays distincts présents dans les voyages, triés."""
    try:
        return trip_service.get_facets(db)
    except PersistenceError:
        raise HTTPException(status_code=500, detail=LIST_FAILED)


@router.post("", response_model=TripResponse, status_code=201, summary="Créer un voyage")
def create_trip(data: TripCreate, db: Session = Depends(get_db)):
    """
    Crée un voyage avec sa liste initiale de voyageurs.
    name, city, country, startDate et endDate sont obligatoires.
    Les voyageurs sans dates reprennent celles du voyage.
    """
    try:
        return trip_service.create_trip(db, data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=500, detail=CREATE_FAILED)


@router.delete("/{trip_id}", response_model=MessageResponse, summary="Supprimer un voyage")
def delete_trip(trip_id: int, db: Session = Depends(get_db)):
    """
    Supprime définitivement un voyage et ses voyageurs.
    Un ID inexistant n'est pas une erreur (réponse identique).
    """
    try:
        trip_service.delete_trip(db, trip_id)
    except PersistenceError:
        raise HTTPException(status_code=500, detail=DELETE_FAILED)
    return MessageResponse(message="Voyage supprimé.")


@router.put("/{trip_id}/join", response_model=MessageResponse, summary="Rejoindre un voyage")
def join_trip(trip_id: int, data: TripJoin, db: Session = Depends(get_db)):
    """
    Ajoute un voyageur à la fin de la liste du voyage.

    - Pas de contrôle de doublon : le même nom peut apparaître deux fois
    - Pas de contrôle d'existence : un ID inconnu renvoie aussi 200
    """
    try:
        trip_service.join_trip(db, trip_id, data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=500, detail=JOIN_FAILED)
    return MessageResponse(message="Voyage rejoint avec succès.")
