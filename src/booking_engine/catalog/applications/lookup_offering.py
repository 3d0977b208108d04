from booking_engine.catalog.domain import (
    CatalogGateway,
    ServiceId,
    ServiceOffering,
    ServiceOfferingFactory,
)
from booking_engine.shared.domain.exception import CatalogUnavailableException
from booking_engine.shared.utils import get_logger

logger = get_logger("catalog")


class LookupOfferingService:
    """サービス定義取得のユースケース

    取得したペイロードを Factory で正規化し、不変の ServiceOffering を返す。
    """

    def __init__(
        self, gateway: CatalogGateway, factory: ServiceOfferingFactory
    ) -> None:
        self._gateway = gateway
        self._factory = factory

    async def lookup(self, service_id: str) -> ServiceOffering:
        """サービス定義を取得する"""
        logger.info("Looking up service offering", service_id=service_id)
        details = await self._gateway.fetch(ServiceId(service_id))
        try:
            return self._factory.create(details)
        except ValueError as e:
            logger.warning(
                "Service offering failed normalization",
                service_id=service_id,
                reason=str(e),
            )
            raise CatalogUnavailableException(
                f"Service offering {service_id} is malformed: {e}", retryable=False
            ) from e
