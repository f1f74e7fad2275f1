"""
Transportation and visa services.

Both resources follow the generic rules without extra business logic.

Dependencies: elham.application.services.resource_service
System role: Service offer use case orchestration
"""

from elham.application.services.resource_service import ResourceService
from elham.boundary.db.CRUD.content_crud import transportation_crud, visa_crud
from elham.models.catalog import TransportationResponse, VisaResponse


class TransportationService(ResourceService[TransportationResponse]):
    resource_name = "Transportation"
    crud = transportation_crud
    response_model = TransportationResponse


class VisaService(ResourceService[VisaResponse]):
    resource_name = "Visa"
    crud = visa_crud
    response_model = VisaResponse
