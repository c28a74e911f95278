from fastapi import APIRouter, Depends, HTTPException

from salon_booking.api.v1.schemas import CategorySchema, ServiceSchema
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.wiring.dependencies import get_service_catalog

router = APIRouter()


@router.get("/services", response_model=list[ServiceSchema])
def list_services(catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    return [ServiceSchema.model_validate(service, from_attributes=True) for service in catalog.list_services()]


@router.get("/services/{service_id}", response_model=ServiceSchema)
def get_service(service_id: str, catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    service = catalog.get_service(service_id)
    if service is None:
        raise HTTPException(status_code=404, detail=f"Unknown service: {service_id}")
    return ServiceSchema.model_validate(service, from_attributes=True)


@router.get("/categories", response_model=list[CategorySchema])
def list_categories(catalog: ServiceCatalogPort = Depends(get_service_catalog)):
    return [CategorySchema.model_validate(category, from_attributes=True) for category in catalog.list_categories()]
