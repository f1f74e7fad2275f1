"""
Admin identity and dashboard counts (JSON).

Routes:
- GET /admin/dashboard - Counts for the dashboard cards

Dependencies: elham.application.services.dashboard_service
System role: Admin landing data
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from elham.api.deps.dependencies import get_dashboard_service, require_admin
from elham.api.routers.router_utils.error_handling import handle_resource_errors
from elham.application.services.dashboard_service import DashboardService
from elham.models.auth import AdminIdentity

router = APIRouter(tags=["admin: dashboard"])


class DashboardResponse(BaseModel):
    greeting: str
    counts: dict[str, int]


@router.get("/dashboard", response_model=DashboardResponse)
@handle_resource_errors("fetch dashboard")
async def get_dashboard(
    admin: AdminIdentity = Depends(require_admin),
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> DashboardResponse:
    counts = await dashboard_service.get_counts()
    return DashboardResponse(
        greeting=f"Welcome back, {admin.name or admin.email}",
        counts=counts,
    )
