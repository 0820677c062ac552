"""API routers."""

from .fhir import router as fhir_router
from .health import router as health_router

__all__ = [
    "fhir_router",
    "health_router",
]
