"""HTTP API for building FHIR Patient resources."""

from .main import app, create_app

__all__ = ["app", "create_app"]
