"""
Tests for lenient admin payload parsing.

Verifies that loosely typed form input (numeric strings, blanks,
camelCase keys) is normalized by the request schemas.

System role: Verification of input normalization
"""

import uuid

from elham.models.auth import LoginRequest
from elham.models.catalog import EventPayload, HotelPayload, RoomPayload, TourPackagePayload
from elham.models.inquiry import InquiryRequest


class TestHotelPayload:
    """Test suite for HotelPayload coercion."""

    def test_camel_case_keys_and_numeric_strings(self) -> None:
        payload = HotelPayload.model_validate(
            {
                "nameEn": "  Swissotel  ",
                "nameAr": "سويس أوتيل",
                "pricePerNight": "450.5",
                "starRating": "4",
                "isFeatured": "true",
            }
        )

        assert payload.name_en == "Swissotel"
        assert payload.price_per_night == 450.5
        assert payload.star_rating == 4
        assert payload.is_featured is True

    def test_blank_and_invalid_values_become_none(self) -> None:
        payload = HotelPayload.model_validate(
            {
                "nameEn": "   ",
                "pricePerNight": "abc",
                "starRating": 9,
                "locationId": "",
            }
        )

        assert payload.name_en is None
        assert payload.price_per_night is None
        assert payload.star_rating is None
        assert payload.location_id is None

    def test_negative_price_is_dropped(self) -> None:
        payload = HotelPayload.model_validate({"pricePerNight": -10})

        assert payload.price_per_night is None

    def test_lists_are_trimmed_and_blank_items_removed(self) -> None:
        payload = HotelPayload.model_validate({"amenities": [" WiFi ", "", None, "Pool"]})

        assert payload.amenities == ["WiFi", "Pool"]

    def test_non_list_becomes_empty_list(self) -> None:
        payload = HotelPayload.model_validate({"gallery": "not-a-list"})

        assert payload.gallery == []

    def test_unset_fields_are_excluded_from_partial_dump(self) -> None:
        payload = HotelPayload.model_validate({"city": "Medina"})

        assert payload.model_dump(exclude_unset=True) == {"city": "Medina"}

    def test_location_reference_parses_uuid(self) -> None:
        location_id = uuid.uuid4()

        payload = HotelPayload.model_validate({"locationId": str(location_id)})

        assert payload.location_id == location_id


class TestOtherPayloads:
    """Test suite for room, package, event and login coercion."""

    def test_room_max_guests_below_one_is_dropped(self) -> None:
        payload = RoomPayload.model_validate({"maxGuests": "0"})

        assert payload.max_guests is None

    def test_itinerary_keeps_entries_with_integer_day(self) -> None:
        payload = TourPackagePayload.model_validate(
            {
                "itinerary": [
                    {"day": 1, "titleEn": " Arrival ", "titleAr": "الوصول"},
                    {"day": "2", "titleEn": "Dropped"},
                    "garbage",
                ]
            }
        )

        assert payload.itinerary == [{"day": 1, "title_en": "Arrival", "title_ar": "الوصول"}]

    def test_event_blank_date_becomes_none(self) -> None:
        payload = EventPayload.model_validate({"eventDate": "", "endDate": "2025-03-01T10:00:00Z"})

        assert payload.event_date is None
        assert payload.end_date is not None

    def test_login_non_string_fields_become_empty(self) -> None:
        request = LoginRequest.model_validate({"email": 12, "password": None})

        assert request.email == ""
        assert request.password == ""


class TestInquiryRequest:
    """Test suite for InquiryRequest coercion."""

    def test_defaults_and_locale_normalization(self) -> None:
        inquiry = InquiryRequest.model_validate({"name": "Omar", "locale": "fr"})

        assert inquiry.type == "general"
        assert inquiry.locale == "en"
        assert inquiry.meta == {}

    def test_phone_joins_country_code(self) -> None:
        inquiry = InquiryRequest.model_validate({"countryCode": "+966", "phone": 501234567})

        assert inquiry.full_phone == "+966 501234567"

    def test_non_dict_meta_is_ignored(self) -> None:
        inquiry = InquiryRequest.model_validate({"meta": ["a", "b"]})

        assert inquiry.meta == {}
