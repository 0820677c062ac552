"""
Common helper functions for FHIR mapping operations.
Shared utilities used across the to_fhir and to_props modules.

Builders return None when inputs are empty so a missing property
leaves the corresponding FHIR element absent.
"""

from typing import Any

from .types import CodedValue


def parse_bool(value: str | None) -> bool | None:
    """
    Parse a boolean property value.

    Accepts "true" and "false" in any case, ignoring surrounding whitespace.

    Args:
        value: Raw property value

    Returns:
        Parsed boolean, or None if the value is not a boolean string
    """
    try:
        normalized = value.strip().lower()
    except AttributeError:
        return None
    return {"true": True, "false": False}.get(normalized)


def format_bool(value: bool | None) -> str | None:
    """Render a boolean the way parse_bool reads it back."""
    if value is None:
        return None
    return "true" if value else "false"


def non_empty(value: str | None) -> str | None:
    """
    Return the value unchanged, or None if it is blank.

    FHIR strings need at least one non-whitespace character, so a blank
    property is treated as not supplied. Other values keep their whitespace.
    """
    if not value or not value.strip():
        return None
    return value


def coding(
    system: str | None,
    code: str | None,
    display: str | None = None,
) -> dict[str, str] | None:
    """
    Create a FHIR Coding, or None if code is empty.

    Args:
        system: Code system URL
        code: The code value
        display: Optional display text

    Returns:
        Coding dict or None
    """
    if not code:
        return None

    result: dict[str, str] = {}
    if system:
        result["system"] = system
    result["code"] = code
    if display:
        result["display"] = display
    return result


def coded_value_coding(value: CodedValue | None) -> dict[str, str] | None:
    """Create a FHIR Coding from a CodedValue, or None if it has no code."""
    if value is None:
        return None
    return coding(value.system, value.code, value.display)


def codeable_concept(value: CodedValue | None) -> dict[str, Any] | None:
    """
    Create a single-coding FHIR CodeableConcept, or None if there is no code.

    Args:
        value: Vocabulary entry to wrap

    Returns:
        CodeableConcept dict or None
    """
    c = coded_value_coding(value)
    if c is None:
        return None
    return {"coding": [c]}


def identifier(value: str | None, use: str | None = None) -> dict[str, Any] | None:
    """
    Create a FHIR Identifier, or None if value is empty.

    Args:
        value: Identifier value
        use: Optional identifier use ("usual", "official", ...)

    Returns:
        Identifier dict or None
    """
    value = non_empty(value)
    if value is None:
        return None

    result: dict[str, Any] = {"value": value}
    if use:
        result["use"] = use
    return result


def extension(
    url: str, value: Any, value_type: str = "valueString"
) -> dict[str, Any] | None:
    """
    Create a FHIR Extension, or None if value is empty.

    Args:
        url: Extension URL
        value: Extension value
        value_type: FHIR value type key (e.g., "valueString", "valueCoding")

    Returns:
        Extension dict or None
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return {"url": url, value_type: value}


def display_text(given: list[str] | None, family: str | None) -> str:
    """
    Build HumanName.text as "<first given> <family>".

    Missing parts render as empty strings, so the result always
    contains the separating space.
    """
    first = given[0] if given else ""
    return f"{first or ''} {family or ''}"


__all__ = [
    "parse_bool",
    "format_bool",
    "non_empty",
    "coding",
    "coded_value_coding",
    "codeable_concept",
    "identifier",
    "extension",
    "display_text",
]
