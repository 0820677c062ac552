"""
Chidian extensions for FHIR x Props mappings.

Provides helpers that integrate with chidian's grab() and @mapper:
- to_dict(): Normalize FHIR models to plain dicts
- first(): Grab the first element of a list at a path
- FHIR extraction helpers: extract_coding, extract_nested_ext
- Reexports from chidian for convenience
"""

from typing import Any

from chidian import grab, mapper


def to_dict(obj: Any) -> dict:
    """
    Convert Pydantic model or dict to dict.

    Handles:
    - Objects with model_dump() (Pydantic v2, fhir.resources)

    Uses mode="json" so dates and decimals arrive as JSON primitives.

    Args:
        obj: Object to convert

    Returns:
        Dictionary representation with JSON-serializable values
    """
    if isinstance(obj, dict):
        return obj
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    raise TypeError(f"Cannot convert {type(obj).__name__} to dict")


def first(source: dict, path: str, default: Any = None) -> Any:
    """
    Return the first element of the list found at path.

    Args:
        source: Source dict
        path: Path to a list (e.g., "name", "address")
        default: Default if the path is missing or the list is empty

    Returns:
        First list element, or default

    Example:
        first(d, "name")  # {"name": [{"family": "Doe"}]} -> {"family": "Doe"}
    """
    items = grab(source, path)
    if not items or not isinstance(items, list):
        return default
    return items[0]


def extract_coding(
    source: dict,
    path: str,
    system: str | None = None,
) -> dict[str, Any] | None:
    """
    Extract a Coding from a FHIR CodeableConcept at the given path.

    Args:
        source: Source dict
        path: Path to CodeableConcept (e.g., "maritalStatus")
        system: Preferred coding system URL; falls back to the first coding

    Returns:
        Coding dict, or None if the concept has no codings
    """
    concept = grab(source, path)
    if not concept or not isinstance(concept, dict):
        return None

    codings = concept.get("coding") or []
    if not codings:
        return None

    if system:
        for c in codings:
            if c.get("system") == system:
                return c
    return codings[0]


def extract_nested_ext(
    source: dict,
    ext_url: str,
    nested_url: str,
    value_type: str = "valueString",
    default: Any = None,
) -> Any:
    """
    Extract a value from a nested FHIR extension.

    Args:
        source: Source dict
        ext_url: Parent extension URL
        nested_url: Nested extension URL
        value_type: Type of value to extract
        default: Default if not found

    Returns:
        Nested extension value

    Example:
        extract_nested_ext(d, US_CORE_RACE_URL, "ombCategory", "valueCoding")
    """
    extensions = grab(source, "extension") or []
    for ext in extensions:
        if ext.get("url") == ext_url:
            for n in ext.get("extension") or []:
                if n.get("url") == nested_url:
                    value = n.get(value_type)
                    if value is not None:
                        return value
    return default


__all__ = [
    # Chidian reexports
    "grab",
    "mapper",
    # Core extensions
    "to_dict",
    "first",
    # FHIR extraction helpers
    "extract_coding",
    "extract_nested_ext",
]
