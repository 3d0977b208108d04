import httpx

from booking_engine.catalog.domain import CatalogGateway, OfferingDetails, ServiceId
from booking_engine.catalog.infrastructure.response_models import (
    ServiceOfferingResponse,
)
from booking_engine.shared.domain.exception import CatalogUnavailableException
from booking_engine.shared.utils import get_logger, resolve_base_url, resolve_timeout

logger = get_logger("catalog")


class HttpCatalogGateway(CatalogGateway):
    """HTTP カタログ API を使用した CatalogGateway の具象実装"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = resolve_base_url(base_url, "CATALOG_API_URL")
        self.timeout = resolve_timeout(timeout)
        self._transport = transport

    async def fetch(self, service_id: ServiceId) -> OfferingDetails:
        """GET /services/{id} でサービス定義を取得する"""
        url = f"{self.base_url}/services/{service_id}"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning(
                "Catalog request failed",
                service_id=str(service_id),
                reason=str(e),
            )
            raise CatalogUnavailableException(
                f"Catalog is unreachable: {e}", retryable=True
            ) from e

        if response.status_code == 404:
            raise CatalogUnavailableException(
                f"Service not found: {service_id}", retryable=False
            )
        if response.is_error:
            raise CatalogUnavailableException(
                f"Catalog responded with {response.status_code}", retryable=True
            )

        try:
            payload = response.json()
            # { "success": true, "service": {...} } 形式も受け付ける
            body = payload.get("service", payload)
            model = ServiceOfferingResponse.model_validate(body)
        except (ValueError, AttributeError) as e:
            logger.exception("Malformed catalog payload")
            raise CatalogUnavailableException(
                f"Malformed catalog payload for {service_id}", retryable=False
            ) from e

        return self._to_details(model)

    def _to_details(self, model: ServiceOfferingResponse) -> OfferingDetails:
        """レスポンスモデルを Factory の入力構造に変換する"""
        return {
            "id": model.id,
            "kind": model.kind,
            "name": model.name,
            "base_price": model.base_price,
            "currency": model.currency,
            "tax_rules": (
                None
                if model.tax_rules is None
                else [
                    {"name": rule.name, "rate_percent": rule.rate_percent}
                    for rule in model.tax_rules
                ]
            ),
            "schedule_options": [
                {
                    "date": option.date,
                    "time_slots": option.time_slots,
                    "boarding_points": option.boarding_points,
                    "dropping_points": option.dropping_points,
                }
                for option in model.schedule_options
            ],
            "max_roster_size": model.max_roster_size,
            "add_ons": [
                {"name": add_on.name, "price": add_on.price}
                for add_on in model.add_ons
            ],
        }
