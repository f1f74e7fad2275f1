"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: elham.configs, elham.application, elham.boundary
System role: DI container for service injection
"""

from datetime import timedelta

from fastapi import Depends, HTTPException, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from elham.application.services.auth_service import AuthService
from elham.application.services.blog_service import BlogPostService
from elham.application.services.dashboard_service import DashboardService
from elham.application.services.event_service import EventService
from elham.application.services.hotel_service import HotelService, RoomService
from elham.application.services.inquiry_service import InquiryService
from elham.application.services.location_service import LocationService
from elham.application.services.offer_service import TransportationService, VisaService
from elham.application.services.package_service import (
    DiscoverCardService,
    PackageCategoryService,
    TourPackageService,
)
from elham.application.services.public_catalog_service import PublicCatalogService
from elham.application.services.testimonial_service import TestimonialService
from elham.application.services.upload_service import UploadService
from elham.boundary.db.connection import get_async_db
from elham.boundary.email.smtp_mailer import SMTPMailer
from elham.boundary.storage.r2_client import R2StorageClient
from elham.configs import Settings, get_settings
from elham.core.session_manager import SessionManager
from elham.models.auth import AdminIdentity


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._storage_client = None
        self._mailer = None

    @property
    def storage_client(self) -> R2StorageClient | None:
        """Get cached R2 client, None while R2_* settings are incomplete."""
        if self._storage_client is None:
            settings = get_settings().storage
            if not settings.is_configured:
                return None
            self._storage_client = R2StorageClient.from_settings(settings)
        return self._storage_client

    @property
    def mailer(self) -> SMTPMailer | None:
        """Get cached SMTP mailer, None while EMAIL_* settings are incomplete."""
        if self._mailer is None:
            settings = get_settings().email
            if not settings.is_configured:
                return None
            self._mailer = SMTPMailer(settings)
        return self._mailer

    def clear(self) -> None:
        """Clear all cached instances."""
        self._storage_client = None
        self._mailer = None


_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


# Authentication


def get_session_manager(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> SessionManager:
    """
    Get session manager bound to the request's database session.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (session lifetime)

    Returns:
        SessionManager: Session manager instance
    """
    return SessionManager(db=db, duration=timedelta(days=settings.auth.session_duration_days))


def get_auth_service(
    db: AsyncSession = Depends(get_async_db),
    session_manager: SessionManager = Depends(get_session_manager),
) -> AuthService:
    return AuthService(db=db, session_manager=session_manager)


def get_session_token(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),
) -> str | None:
    """Session token from the admin cookie, None when absent."""
    return request.cookies.get(settings.auth.cookie_name) or None


async def get_optional_admin(
    token: str | None = Depends(get_session_token),
    session_manager: SessionManager = Depends(get_session_manager),
) -> AdminIdentity | None:
    """
    Resolve the caller's session without failing.

    Returns:
        AdminIdentity when the cookie carries a live session, None otherwise
    """
    return await session_manager.resolve_session(token)


async def require_admin(
    admin: AdminIdentity | None = Depends(get_optional_admin),
) -> AdminIdentity:
    """
    Gate for every admin API route.

    Missing, unknown and expired tokens are indistinguishable to the caller.

    Raises:
        HTTPException: 401 when there is no live session
    """
    if admin is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return admin


# Admin resources


def get_hotel_service(db: AsyncSession = Depends(get_async_db)) -> HotelService:
    """
    Get hotel service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        HotelService: Hotel service instance
    """
    return HotelService(db=db)


def get_room_service(db: AsyncSession = Depends(get_async_db)) -> RoomService:
    return RoomService(db=db)


def get_location_service(db: AsyncSession = Depends(get_async_db)) -> LocationService:
    return LocationService(db=db)


def get_package_category_service(
    db: AsyncSession = Depends(get_async_db),
) -> PackageCategoryService:
    return PackageCategoryService(db=db)


def get_tour_package_service(db: AsyncSession = Depends(get_async_db)) -> TourPackageService:
    return TourPackageService(db=db)


def get_discover_card_service(db: AsyncSession = Depends(get_async_db)) -> DiscoverCardService:
    return DiscoverCardService(db=db)


def get_event_service(db: AsyncSession = Depends(get_async_db)) -> EventService:
    return EventService(db=db)


def get_transportation_service(
    db: AsyncSession = Depends(get_async_db),
) -> TransportationService:
    return TransportationService(db=db)


def get_visa_service(db: AsyncSession = Depends(get_async_db)) -> VisaService:
    return VisaService(db=db)


def get_blog_post_service(db: AsyncSession = Depends(get_async_db)) -> BlogPostService:
    return BlogPostService(db=db)


def get_testimonial_service(db: AsyncSession = Depends(get_async_db)) -> TestimonialService:
    return TestimonialService(db=db)


def get_dashboard_service(db: AsyncSession = Depends(get_async_db)) -> DashboardService:
    return DashboardService(db=db)


# Uploads, inquiries and public reads


def get_storage_client() -> R2StorageClient | None:
    """
    Get R2 client for image uploads.

    Returns:
        R2StorageClient, or None when storage is not configured
    """
    return get_service_cache().storage_client


def get_mailer() -> SMTPMailer | None:
    """Get SMTP mailer, or None when mail is not configured."""
    return get_service_cache().mailer


def get_upload_service(
    storage: R2StorageClient | None = Depends(get_storage_client),
    settings: Settings = Depends(get_settings_dependency),
) -> UploadService:
    return UploadService(
        storage=storage,
        max_bytes=settings.storage.max_upload_bytes,
        key_prefix=settings.storage.key_prefix,
    )


def get_inquiry_service(
    db: AsyncSession = Depends(get_async_db),
    mailer: SMTPMailer | None = Depends(get_mailer),
) -> InquiryService:
    """
    Get inquiry notifier.

    Args:
        db: Async database session (injected via Depends)
        mailer: SMTP transport (injected via Depends)

    Returns:
        InquiryService: Inquiry service instance
    """
    return InquiryService(db=db, mailer=mailer)


def get_public_catalog_service(
    db: AsyncSession = Depends(get_async_db),
    locale: str = Query("en", description="Content locale: en or ar"),
) -> PublicCatalogService:
    return PublicCatalogService(db=db, locale=locale)
