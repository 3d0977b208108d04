from .catalog_gateway import CatalogGateway as CatalogGateway
