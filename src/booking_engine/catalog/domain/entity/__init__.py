from .service_offering import ServiceOffering as ServiceOffering
