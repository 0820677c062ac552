"""FHIR Patient → property map"""

import logging

from fhir.resources.patient import Patient

from ..chidian_ext import (
    extract_coding,
    extract_nested_ext,
    first,
    grab,
    mapper,
    to_dict,
)
from ..fhir_lib import format_bool
from ..utils import flatten
from ..vocab import (
    MARITAL_STATUS_SYSTEM,
    US_CORE_RACE_URL,
    marital_code_for,
    race_display_for,
)

logger = logging.getLogger(__name__)


def _first_item(values: list | None) -> str | None:
    return values[0] if values else None


def _marital_status_code(d: dict) -> str | None:
    """Extract a marital status code known to the vocabulary table."""
    c = extract_coding(d, "maritalStatus", system=MARITAL_STATUS_SYSTEM)
    if c is None:
        return None
    code = marital_code_for(c.get("system"), c.get("code"))
    if code is None:
        logger.warning(
            "Marital status %s|%s is not in the code table; dropped",
            c.get("system"),
            c.get("code"),
        )
    return code


def _race_display(d: dict) -> str | None:
    """Extract the OMB category display from the US Core race extension."""
    c = extract_nested_ext(d, US_CORE_RACE_URL, "ombCategory", "valueCoding")
    if not c:
        return None
    return race_display_for(c.get("system"), c.get("code"))


def _warn_lossy(d: dict) -> None:
    for field in ("identifier", "name", "address"):
        items = grab(d, field) or []
        if len(items) > 1:
            logger.warning(
                "Patient has %d %s entries; only the first is preserved",
                len(items),
                field,
            )


@mapper
def _to_property_tree(d: dict):
    """Core mapping from FHIR Patient dict to nested property structure."""
    _warn_lossy(d)

    ident = first(d, "identifier", {})
    name = first(d, "name", {})
    address = first(d, "address", {})

    return {
        "identifier": ident.get("value"),
        "active": format_bool(grab(d, "active")),
        "name": {
            "family": name.get("family"),
            "given": _first_item(name.get("given")),
        },
        "address": {
            "line": _first_item(address.get("line")),
            "city": address.get("city"),
            "district": address.get("district"),
            "state": address.get("state"),
            "postalCode": address.get("postalCode"),
            "country": address.get("country"),
        },
        "maritalStatus": _marital_status_code(d),
        "race": _race_display(d),
    }


def convert(src: Patient) -> dict[str, str]:
    """Convert FHIR Patient to a flat property map.

    Only the first identifier, name and address are read. Marital status
    and race are kept only when they match the vocabulary tables.

    Args:
        src: FHIR Patient resource

    Returns:
        Dotted property path -> string value, without empty entries
    """
    return flatten(_to_property_tree(to_dict(src)))
