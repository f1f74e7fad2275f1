"""
Location service.

Dependencies: elham.application.services.resource_service
System role: Location use case orchestration
"""

from elham.application.services.resource_service import ResourceService
from elham.boundary.db.CRUD.location_crud import location_crud
from elham.models.catalog import LocationResponse


class LocationService(ResourceService[LocationResponse]):
    """Admin operations on locations."""

    resource_name = "Location"
    crud = location_crud
    response_model = LocationResponse
    require_on_update = True
