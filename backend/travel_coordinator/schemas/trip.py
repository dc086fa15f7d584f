"""
Schémas Pydantic pour les voyages et leurs voyageurs.

Les noms de champs exposés sont en camelCase (startDate, endDate, createdAt),
les attributs Python restent en snake_case (populate_by_name=True).

Les champs obligatoires sont déclarés Optional volontairement : leur présence
est contrôlée par trip_service, qui lève une ValidationError (400) sans
écrire en base. Les chaînes vides ou composées d'espaces deviennent None,
les autres sont conservées telles quelles (pas de trim).

Note : on importe datetime en tant que module (dt) pour garder le type
`dt.date` lisible à côté des champs start_date / end_date.
"""

import datetime as dt
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _blank_to_none(v: Any) -> Any:
    """Chaîne vide ou blanche → None, toute autre valeur inchangée."""
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _date_only(v: Any) -> Any:
    """Accepte '2026-03-01T00:00:00Z' et ne garde que la partie YYYY-MM-DD."""
    v = _blank_to_none(v)
    if isinstance(v, str):
        v = v.strip()
    if isinstance(v, str) and len(v) > 10 and v[10] in ("T", " "):
        return v[:10]
    if isinstance(v, datetime):
        return v.date()
    return v


class TravelerIn(BaseModel):
    """
    Voyageur fourni à la création d'un voyage.
    Accepté tel quel : les dates absentes reprennent celles du voyage.
    """
    model_config = CAMEL_CASE

    name: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        return _date_only(v)


class TravelerResponse(BaseModel):
    model_config = CAMEL_CASE

    name: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        return _date_only(v)


class TripCreate(BaseModel):
    model_config = CAMEL_CASE

    name: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    travelers: List[TravelerIn] = []

    @field_validator("name", "city", "country", mode="before")
    @classmethod
    def blank_text(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        return _date_only(v)

    @field_validator("travelers", mode="before")
    @classmethod
    def null_travelers(cls, v: Any) -> Any:
        return [] if v is None else v


class TripJoin(BaseModel):
    """Corps de la requête PUT /api/trips/{id}/join."""
    model_config = CAMEL_CASE

    name: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None

    @field_validator("name", mode="before")
    @classmethod
    def blank_name(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        return _date_only(v)


class TripResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str
    city: str
    country: str
    start_date: dt.date
    end_date: dt.date
    travelers: List[TravelerResponse] = []
    created_at: Optional[datetime] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        return _date_only(v)


class TripFacets(BaseModel):
    """Valeurs distinctes pour les listes de filtres (voyageurs, pays), triées."""
    travelers: List[str]
    countries: List[str]


class MessageResponse(BaseModel):
    message: str
