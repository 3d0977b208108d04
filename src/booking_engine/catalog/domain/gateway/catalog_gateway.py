from abc import ABC, abstractmethod

from booking_engine.catalog.domain.factory import OfferingDetails
from booking_engine.catalog.domain.value_object import ServiceId


class CatalogGateway(ABC):
    """カタログ参照のインターフェース"""

    @abstractmethod
    async def fetch(self, service_id: ServiceId) -> OfferingDetails:
        """サービス定義を1件取得する

        Raises:
            CatalogUnavailableException: 取得できなかった場合
        """
        raise NotImplementedError
