from dataclasses import replace
from decimal import Decimal

from booking_engine.booking.infrastructure.request_models import BookingCreationRequest
from booking_engine.catalog.domain import ServiceKind
from booking_engine.pricing.domain import compute_pricing


class TestBookingCreationRequest:
    def test_roster_payload(self, create_snapshot):
        payload = BookingCreationRequest.from_snapshot(create_snapshot()).to_payload()

        assert payload["serviceId"] == "svc-kathmandu-pokhara"
        assert payload["kind"] == "seat-transport"
        assert payload["schedule"] == {
            "date": "2024-01-15",
            "timeSlot": "07:00",
            "boardingPoint": "Kalanki",
            "droppingPoint": "Lakeside",
        }
        assert [item["name"] for item in payload["roster"]] == [
            "Traveller 1",
            "Traveller 2",
        ]
        assert "quantity" not in payload
        assert payload["contact"] == {
            "name": "Sita Sharma",
            "phone": "+977 9800000000",
            "email": "sita@example.com",
        }
        assert payload["notes"] == ""

    def test_pricing_payload(self, create_snapshot):
        request = BookingCreationRequest.from_snapshot(create_snapshot())
        pricing = request.to_payload()["pricing"]

        assert pricing["currency"] == "NPR"
        assert pricing["urgency"] == "STANDARD"
        assert Decimal(pricing["base"]) == Decimal("1600")
        assert Decimal(pricing["taxes"][0]["amount"]) == Decimal("208")
        assert Decimal(pricing["total"]) == Decimal("1808")
        assert "promoCode" not in pricing

    def test_cargo_payload_carries_quantity(self, create_snapshot, create_offering):
        cargo = create_offering(kind=ServiceKind.CARGO)
        snapshot = replace(
            create_snapshot(travellers=1),
            kind=ServiceKind.CARGO,
            roster=(),
            quantity=Decimal("2.5"),
            pricing=compute_pricing(cargo, Decimal("2.5")),
        )

        payload = BookingCreationRequest.from_snapshot(snapshot).to_payload()

        assert "roster" not in payload
        assert Decimal(payload["quantity"]) == Decimal("2.5")
        assert payload["kind"] == "cargo"
