# storefront/schemas/health.py
from storefront.schemas.base import CamelModel


class HealthStatus(CamelModel):
    status: str
    message: str
