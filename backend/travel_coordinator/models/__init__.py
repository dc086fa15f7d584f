# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant create_all (bootstrap) et avant le chargement des routers.

from travel_coordinator.models.trip import Trip  # noqa: F401
