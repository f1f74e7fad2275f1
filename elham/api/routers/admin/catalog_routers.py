"""
Admin endpoints for packages, events, transportation, visas, blog posts
and testimonials.

Each resource gets GET/POST on the collection and GET/PUT/DELETE on
``/{id}`` through the shared router factory.

Dependencies: elham.api.routers.router_utils.crud_router, elham.models.catalog
System role: Catalog management HTTP API
"""

from elham.api.deps.dependencies import (
    get_blog_post_service,
    get_event_service,
    get_testimonial_service,
    get_tour_package_service,
    get_transportation_service,
    get_visa_service,
)
from elham.api.routers.router_utils.crud_router import build_resource_router
from elham.models.catalog import (
    BlogPostPayload,
    BlogPostResponse,
    EventPayload,
    EventResponse,
    TestimonialPayload,
    TestimonialResponse,
    TourPackagePayload,
    TourPackageResponse,
    TransportationPayload,
    TransportationResponse,
    VisaPayload,
    VisaResponse,
)

packages_router = build_resource_router(
    "/packages", "admin: packages", TourPackagePayload, TourPackageResponse,
    get_tour_package_service, "package", "packages",
)
events_router = build_resource_router(
    "/events", "admin: events", EventPayload, EventResponse,
    get_event_service, "event", "events",
)
transportation_router = build_resource_router(
    "/transportation", "admin: transportation", TransportationPayload, TransportationResponse,
    get_transportation_service, "transportation", "transportation",
)
visas_router = build_resource_router(
    "/visas", "admin: visas", VisaPayload, VisaResponse,
    get_visa_service, "visa", "visas",
)
blog_router = build_resource_router(
    "/blog", "admin: blog", BlogPostPayload, BlogPostResponse,
    get_blog_post_service, "article", "articles",
)
testimonials_router = build_resource_router(
    "/testimonials", "admin: testimonials", TestimonialPayload, TestimonialResponse,
    get_testimonial_service, "testimonial", "testimonials",
)

ROUTERS = (
    packages_router,
    events_router,
    transportation_router,
    visas_router,
    blog_router,
    testimonials_router,
)
