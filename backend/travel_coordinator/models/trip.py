"""
Modèle SQLAlchemy pour les voyages.

Les voyageurs sont embarqués dans la ligne du voyage (colonne JSONB) :
liste ordonnée de {name, startDate, endDate}, ordre d'insertion = ordre d'arrivée.
"""

from sqlalchemy import Column, Date, DateTime, Integer, String, func
from sqlalchemy.dialects.postgresql import JSONB

from travel_coordinator.database import Base


class Trip(Base):
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, autoincrement=True)  # SERIAL
    name = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    country = Column(String(255), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    travelers = Column(JSONB, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
