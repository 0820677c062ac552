"""FHIR JSON rendering for built resources."""

from fhir.resources.resource import Resource

FHIR_JSON_MEDIA_TYPE = "application/fhir+json"


def to_json(resource: Resource, indent: int | None = 2) -> str:
    """Render a FHIR resource as JSON.

    Args:
        resource: Any fhir.resources resource
        indent: Spaces per level; None for compact output

    Returns:
        FHIR JSON text
    """
    return resource.model_dump_json(indent=indent, by_alias=True, exclude_none=True)
