"""
End-to-end tests for the admin resource API.

Runs against the in-memory database with a logged-in admin client.

System role: Verification of admin CRUD semantics
"""

import uuid

import pytest

HOTEL = {
    "nameEn": "Swissotel Makkah",
    "nameAr": "سويس أوتيل مكة",
    "descriptionEn": "Steps from the Haram",
    "pricePerNight": "450",
    "starRating": "5",
    "amenities": ["WiFi", " ", "Breakfast"],
}


class TestHotels:
    """Test suite for /api/admin/hotels and rooms."""

    @pytest.mark.asyncio
    async def test_create_hotel_applies_defaults(self, admin_client) -> None:
        response = await admin_client.post("/api/admin/hotels", json=HOTEL)

        assert response.status_code == 201
        body = response.json()
        assert body["name_en"] == "Swissotel Makkah"
        assert body["price_per_night"] == 450.0
        assert body["amenities"] == ["WiFi", "Breakfast"]
        assert body["city"] == "Mecca"
        assert body["currency"] == "SAR"
        assert body["is_active"] is True
        assert body["is_featured"] is False
        assert body["gallery"] == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["nameEn", "nameAr"])
    async def test_create_hotel_requires_both_names(self, admin_client, missing) -> None:
        payload = {key: value for key, value in HOTEL.items() if key != missing}

        response = await admin_client.post("/api/admin/hotels", json=payload)

        assert response.status_code == 400
        assert response.json() == {"detail": "Name (EN) and Name (AR) are required"}

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, admin_client) -> None:
        hotel = (await admin_client.post("/api/admin/hotels", json=HOTEL)).json()

        response = await admin_client.put(
            f"/api/admin/hotels/{hotel['id']}",
            json={"isFeatured": True, "descriptionEn": None, "nameAr": None},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["is_featured"] is True
        assert body["description_en"] is None
        assert body["name_ar"] == "سويس أوتيل مكة"
        assert body["price_per_night"] == 450.0

    @pytest.mark.asyncio
    async def test_unknown_hotel_is_404(self, admin_client) -> None:
        missing = uuid.uuid4()

        get_response = await admin_client.get(f"/api/admin/hotels/{missing}")
        put_response = await admin_client.put(f"/api/admin/hotels/{missing}", json={"city": "x"})
        delete_response = await admin_client.delete(f"/api/admin/hotels/{missing}")

        for response in (get_response, put_response, delete_response):
            assert response.status_code == 404
            assert response.json() == {"detail": "Hotel not found"}

    @pytest.mark.asyncio
    async def test_rooms_lifecycle(self, admin_client) -> None:
        # Arrange
        hotel = (await admin_client.post("/api/admin/hotels", json=HOTEL)).json()

        # Act
        room_response = await admin_client.post(
            f"/api/admin/hotels/{hotel['id']}/rooms",
            json={"nameEn": "Kaaba View", "nameAr": "إطلالة الكعبة", "maxGuests": "3"},
        )
        listing = await admin_client.get("/api/admin/hotels")
        detail = await admin_client.get(f"/api/admin/hotels/{hotel['id']}")

        # Assert
        assert room_response.status_code == 201
        room = room_response.json()
        assert room["hotel_id"] == hotel["id"]
        assert room["max_guests"] == 3
        assert room["price_per_night"] == 0
        assert listing.json()[0]["room_count"] == 1
        assert [r["id"] for r in detail.json()["rooms"]] == [room["id"]]

    @pytest.mark.asyncio
    async def test_room_for_unknown_hotel_is_404(self, admin_client) -> None:
        response = await admin_client.post(
            f"/api/admin/hotels/{uuid.uuid4()}/rooms",
            json={"nameEn": "Suite", "nameAr": "جناح"},
        )

        assert response.status_code == 404
        assert response.json() == {"detail": "Hotel not found"}

    @pytest.mark.asyncio
    async def test_deleting_hotel_deletes_rooms(self, admin_client) -> None:
        hotel = (await admin_client.post("/api/admin/hotels", json=HOTEL)).json()
        room = (
            await admin_client.post(
                f"/api/admin/hotels/{hotel['id']}/rooms",
                json={"nameEn": "Suite", "nameAr": "جناح"},
            )
        ).json()

        response = await admin_client.delete(f"/api/admin/hotels/{hotel['id']}")

        assert response.json() == {"success": True}
        assert (await admin_client.get(f"/api/admin/rooms/{room['id']}")).status_code == 404


class TestTaxonomy:
    """Test suite for categories, locations and the discover card."""

    @pytest.mark.asyncio
    async def test_category_patch_requires_both_names(self, admin_client) -> None:
        category = (
            await admin_client.post(
                "/api/admin/categories", json={"nameEn": "Umrah", "nameAr": "عمرة"}
            )
        ).json()

        response = await admin_client.patch(
            f"/api/admin/categories/{category['id']}", json={"nameEn": "Umrah Plus"}
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Name (EN) and Name (AR) are required"}

    @pytest.mark.asyncio
    async def test_deleting_category_detaches_packages(self, admin_client) -> None:
        category = (
            await admin_client.post(
                "/api/admin/categories", json={"nameEn": "Hajj", "nameAr": "حج"}
            )
        ).json()
        package = (
            await admin_client.post(
                "/api/admin/packages",
                json={"titleEn": "Hajj 2025", "titleAr": "حج ٢٠٢٥", "categoryId": category["id"]},
            )
        ).json()

        response = await admin_client.delete(f"/api/admin/categories/{category['id']}")

        assert response.json() == {"ok": True}
        refreshed = await admin_client.get(f"/api/admin/packages/{package['id']}")
        assert refreshed.json()["category_id"] is None

    @pytest.mark.asyncio
    async def test_categories_sorted_by_sort_order(self, admin_client) -> None:
        await admin_client.post(
            "/api/admin/categories", json={"nameEn": "B", "nameAr": "ب", "sortOrder": 2}
        )
        await admin_client.post(
            "/api/admin/categories", json={"nameEn": "A", "nameAr": "أ", "sortOrder": "1"}
        )

        response = await admin_client.get("/api/admin/categories")

        assert [c["name_en"] for c in response.json()] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_discover_card_upsert(self, admin_client) -> None:
        assert (await admin_client.get("/api/admin/package-discover-card")).json() is None

        saved = await admin_client.patch(
            "/api/admin/package-discover-card",
            json={"titleEn": "Find your journey", "isVisible": False},
        )
        again = await admin_client.patch(
            "/api/admin/package-discover-card", json={"imageUrl": "https://img/x.jpg"}
        )

        assert saved.status_code == 200
        assert again.json()["id"] == saved.json()["id"]
        assert again.json()["title_en"] == "Find your journey"
        assert again.json()["is_visible"] is False


class TestContent:
    """Test suite for packages, events, blog posts and testimonials."""

    @pytest.mark.asyncio
    async def test_package_requires_titles(self, admin_client) -> None:
        response = await admin_client.post("/api/admin/packages", json={"titleEn": "Only EN"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Title (EN) and Title (AR) are required"}

    @pytest.mark.asyncio
    async def test_event_slug_is_derived_and_unique(self, admin_client) -> None:
        event = {"titleEn": "Ramadan Umrah Night", "titleAr": "ليلة عمرة رمضان", "eventDate": "2025-03-10T18:00:00Z"}

        first = await admin_client.post("/api/admin/events", json=event)
        second = await admin_client.post("/api/admin/events", json=event)

        assert first.status_code == 201
        assert first.json()["slug"] == "ramadan-umrah-night"
        assert second.status_code == 400
        assert second.json() == {"detail": "Slug already exists"}

    @pytest.mark.asyncio
    async def test_blog_slugs_get_numeric_suffix(self, admin_client) -> None:
        post = {"titleEn": "Umrah Guide", "titleAr": "دليل العمرة", "isPublished": True}

        first = (await admin_client.post("/api/admin/blog", json=post)).json()
        second = (await admin_client.post("/api/admin/blog", json=post)).json()

        assert first["slug"] == "umrah-guide"
        assert second["slug"] == "umrah-guide-2"
        assert first["published_at"] is not None

    @pytest.mark.asyncio
    async def test_draft_post_has_no_publish_date(self, admin_client) -> None:
        post = (
            await admin_client.post(
                "/api/admin/blog", json={"titleEn": "Draft", "titleAr": "مسودة"}
            )
        ).json()

        assert post["is_published"] is False
        assert post["published_at"] is None

    @pytest.mark.asyncio
    async def test_testimonial_rules(self, admin_client) -> None:
        missing = await admin_client.post(
            "/api/admin/testimonials", json={"nameEn": "Ali", "nameAr": "علي"}
        )
        created = await admin_client.post(
            "/api/admin/testimonials",
            json={"nameEn": "Ali", "nameAr": "علي", "contentEn": "Wonderful trip", "rating": "4"},
        )

        assert missing.status_code == 400
        assert missing.json() == {
            "detail": "Name (EN), Name (AR), and Comment (EN) are required"
        }
        assert created.json()["content_ar"] == "Wonderful trip"
        assert created.json()["rating"] == 4

    @pytest.mark.asyncio
    async def test_dashboard_counts(self, admin_client) -> None:
        await admin_client.post("/api/admin/hotels", json=HOTEL)

        response = await admin_client.get("/api/admin/dashboard")

        assert response.status_code == 200
        body = response.json()
        assert body["counts"]["hotels"] == 1
        assert body["counts"]["packages"] == 0
