"""Property map → FHIR Patient"""

import logging
from types import MappingProxyType

from fhir.resources.patient import Patient

from ..chidian_ext import grab, mapper
from ..fhir_lib import (
    codeable_concept,
    coded_value_coding,
    display_text,
    extension,
    identifier,
    non_empty,
    parse_bool,
)
from ..types import PropertyMap
from ..utils import unflatten
from ..vocab import US_CORE_RACE_URL, lookup_marital_status, lookup_race

logger = logging.getLogger(__name__)


def _official_identifier(value: str):
    """Create the official identifier."""
    return identifier(value, use="official")


def _active(value: str):
    """Parse the active flag; unparseable input counts as false."""
    parsed = parse_bool(value)
    if parsed is None:
        logger.warning("Unparseable active flag %r; defaulting to false", value)
        return False
    return parsed


def _single(value: str):
    """Wrap a value as a one-element list."""
    v = non_empty(value)
    return [v] if v else None


def _marital_status(value: str):
    """Build maritalStatus CodeableConcept from a table code."""
    concept = codeable_concept(lookup_marital_status(value))
    if concept is None:
        logger.warning("Unknown marital status code %r; leaving it unset", value)
    return concept


def _race_extension(value: str):
    """Build US Core race extension from an OMB category display."""
    race = lookup_race(value)
    if race is None:
        logger.warning("Unknown race category %r; leaving it unset", value)
        return None
    return {
        "url": US_CORE_RACE_URL,
        "extension": [
            extension("ombCategory", coded_value_coding(race), "valueCoding"),
            extension("text", race.display),
        ],
    }


# Recognized property key -> transform producing the FHIR fragment stored
# at that key's path. A transform returning None leaves the element absent.
PROPERTY_TRANSFORMS = MappingProxyType(
    {
        "identifier": _official_identifier,
        "active": _active,
        "name.family": non_empty,
        "name.given": _single,
        "address.line": _single,
        "address.city": non_empty,
        "address.district": non_empty,
        "address.state": non_empty,
        "address.postalCode": non_empty,
        "address.country": non_empty,
        "maritalStatus": _marital_status,
        "race": _race_extension,
    }
)


def _collect(properties: PropertyMap) -> dict:
    """Apply transforms in input order and nest the results by key path."""
    fragments = []
    for key, value in properties.items():
        transform = PROPERTY_TRANSFORMS.get(key)
        if transform is None:
            logger.debug("Ignoring unrecognized property %r", key)
            continue
        fragments.append((key, transform(value)))
    return unflatten(fragments)


@mapper(remove_empty=False)
def _to_fhir_patient(d: dict):
    """Core mapping from collected fragments to FHIR Patient structure."""
    ident = grab(d, "identifier")
    given = grab(d, "name.given")
    family = grab(d, "name.family")
    race = grab(d, "race")

    # Exactly one name and one address, present even when empty
    return {
        "resourceType": "Patient",
        "identifier": [ident] if ident else None,
        "active": grab(d, "active"),
        "name": [
            {
                "family": family,
                "given": given,
                "text": display_text(given, family),
            }
        ],
        "address": [
            {
                "line": grab(d, "address.line"),
                "city": grab(d, "address.city"),
                "district": grab(d, "address.district"),
                "state": grab(d, "address.state"),
                "postalCode": grab(d, "address.postalCode"),
                "country": grab(d, "address.country"),
            }
        ],
        "maritalStatus": grab(d, "maritalStatus"),
        "extension": [race] if race else None,
    }


def convert(src: PropertyMap) -> Patient:
    """Build a FHIR Patient from a flat property map.

    Unknown keys are ignored, an unparseable ``active`` becomes false and
    unknown marital status or race values leave those elements absent.
    This never raises for a map of string values.

    Args:
        src: Ordered mapping of dotted property path to string value

    Returns:
        FHIR Patient resource
    """
    return Patient(**_to_fhir_patient(_collect(src)))


build = convert
