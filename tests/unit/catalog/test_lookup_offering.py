from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from booking_engine.catalog.applications import LookupOfferingService
from booking_engine.catalog.domain import ServiceId, ServiceOffering, ServiceOfferingFactory
from booking_engine.shared.domain.exception import CatalogUnavailableException


def _details(**overrides) -> dict:
    details = {
        "id": "svc-1",
        "kind": "tour",
        "name": "Everest Base Camp",
        "base_price": Decimal("1500"),
        "currency": "NPR",
        "tax_rules": None,
        "schedule_options": [],
        "max_roster_size": None,
        "add_ons": [],
    }
    details.update(overrides)
    return details


class TestLookupOfferingService:
    @pytest.mark.asyncio
    async def test_lookup_normalizes_offering(self):
        gateway = AsyncMock()
        gateway.fetch.return_value = _details()
        service = LookupOfferingService(gateway=gateway, factory=ServiceOfferingFactory())

        offering = await service.lookup("svc-1")

        assert isinstance(offering, ServiceOffering)
        assert offering.max_roster_size == 6
        gateway.fetch.assert_awaited_once_with(ServiceId("svc-1"))

    @pytest.mark.asyncio
    async def test_malformed_offering_is_not_retryable(self):
        gateway = AsyncMock()
        gateway.fetch.return_value = _details(kind="spaceship")
        service = LookupOfferingService(gateway=gateway, factory=ServiceOfferingFactory())

        with pytest.raises(CatalogUnavailableException) as exc_info:
            await service.lookup("svc-1")

        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_gateway_errors_propagate(self):
        gateway = AsyncMock()
        gateway.fetch.side_effect = CatalogUnavailableException("down", retryable=True)
        service = LookupOfferingService(gateway=gateway, factory=ServiceOfferingFactory())

        with pytest.raises(CatalogUnavailableException) as exc_info:
            await service.lookup("svc-1")

        assert exc_info.value.retryable is True
