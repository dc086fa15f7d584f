"""
Configuration partagée pour tous les tests.
Override la dépendance get_db pour éviter toute connexion réelle à PostgreSQL.
"""

import threading
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from travel_coordinator.database import get_db
from travel_coordinator.main import app
from travel_coordinator.models.trip import Trip


class InMemoryTripStore:
    """
    Double en mémoire du module trip_store (mêmes signatures, même sémantique) :
    tri par date de début, delete/append sans effet sur un ID inconnu,
    append inconditionnel, atomique comme le UPDATE ... || d'une seule requête.
    """

    def __init__(self):
        self.rows: dict[int, Trip] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list_trips(self, db):
        return sorted(self.rows.values(), key=lambda t: t.start_date)

    def create_trip(self, db, name, city, country, start_date, end_date, travelers):
        trip = Trip(
            id=self._next_id,
            name=name,
            city=city,
            country=country,
            start_date=start_date,
            end_date=end_date,
            travelers=list(travelers),
            created_at=datetime.now(timezone.utc),
        )
        self.rows[trip.id] = trip
        self._next_id += 1
        return trip

    def delete_trip(self, db, trip_id):
        self.rows.pop(trip_id, None)

    def append_traveler(self, db, trip_id, traveler):
        with self._lock:
            trip = self.rows.get(trip_id)
            if trip is not None:
                trip.travelers = trip.travelers + [traveler]


@pytest.fixture
def client():
    """Client HTTP de test avec la BDD mockée."""
    mock_db = MagicMock()
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def memory_store():
    """Remplace trip_store par un stockage en mémoire pour le service."""
    store = InMemoryTripStore()
    with patch("travel_coordinator.services.trip_service.trip_store", store):
        yield store
