from .http_catalog_gateway import HttpCatalogGateway as HttpCatalogGateway
