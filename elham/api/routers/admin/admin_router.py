"""
Admin API aggregate router.

Every route below /admin requires a live admin session.

Dependencies: elham.api.deps.dependencies
System role: Authentication boundary for the admin HTTP API
"""

from fastapi import APIRouter, Depends

from elham.api.deps.dependencies import require_admin
from elham.api.routers.admin import (
    catalog_routers,
    dashboard_router,
    hotels_router,
    taxonomy_router,
    uploads_router,
)

router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])

router.include_router(dashboard_router.router)
router.include_router(hotels_router.router)
router.include_router(taxonomy_router.router)
router.include_router(uploads_router.router)
for resource_router in catalog_routers.ROUTERS:
    router.include_router(resource_router)
