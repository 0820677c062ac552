"""
Fixed code tables used when mapping properties to FHIR codings.

Tables are read-only mappings so they can be shared freely between
concurrent builds.
"""

from types import MappingProxyType

from .types import CodedValue

MARITAL_STATUS_SYSTEM = "http://terminology.hl7.org/CodeSystem/v3-MaritalStatus"
NULL_FLAVOR_SYSTEM = "http://terminology.hl7.org/CodeSystem/v3-NullFlavor"
OMB_RACE_SYSTEM = "urn:oid:2.16.840.1.113883.6.238"

US_CORE_RACE_URL = "http://hl7.org/fhir/us/core/StructureDefinition/us-core-race"


def _marital(code: str, display: str, system: str = MARITAL_STATUS_SYSTEM):
    return code, CodedValue(code=code, system=system, display=display)


# code -> CodedValue, see https://www.hl7.org/fhir/valueset-marital-status.html
MARITAL_STATUS = MappingProxyType(
    dict(
        [
            _marital("A", "Annulled"),
            _marital("D", "Divorced"),
            _marital("I", "Interlocutory"),
            _marital("L", "Legally Separated"),
            _marital("M", "Married"),
            _marital("P", "Polygamous"),
            _marital("S", "Never Married"),
            _marital("T", "Domestic partner"),
            _marital("U", "unmarried"),
            _marital("W", "Widowed"),
            _marital("UNK", "unknown", system=NULL_FLAVOR_SYSTEM),
        ]
    )
)

# OMB category display -> code
OMB_RACE_CODES = MappingProxyType(
    {
        "American Indian or Alaska Native": "1002-5",
        "Asian": "2028-9",
        "Black or African American": "2054-5",
        "Native Hawaiian or Other Pacific Islander": "2076-8",
        "White": "2106-3",
    }
)


def lookup_marital_status(code: str | None) -> CodedValue | None:
    """
    Look up a marital status code.

    Args:
        code: Exact, case-sensitive code (e.g. "M", "UNK")

    Returns:
        Matching CodedValue, or None if the code is not in the table
    """
    if code is None:
        return None
    return MARITAL_STATUS.get(code)


def lookup_race(display: str | None) -> CodedValue | None:
    """
    Look up an OMB race category by its display string.

    The display is returned verbatim as the CodedValue display.

    Args:
        display: Exact category display (e.g. "Asian")

    Returns:
        Matching CodedValue, or None if the display is not in the table
    """
    if display is None:
        return None
    code = OMB_RACE_CODES.get(display)
    if code is None:
        return None
    return CodedValue(code=code, system=OMB_RACE_SYSTEM, display=display)


def marital_code_for(system: str | None, code: str | None) -> str | None:
    """Return `code` if (system, code) is an entry of the marital status table."""
    entry = lookup_marital_status(code)
    if entry is None or entry.system != system:
        return None
    return entry.code


def race_display_for(system: str | None, code: str | None) -> str | None:
    """Return the OMB display for `code`, or None if it is not a known category."""
    if system != OMB_RACE_SYSTEM:
        return None
    for display, omb_code in OMB_RACE_CODES.items():
        if omb_code == code:
            return display
    return None


__all__ = [
    "MARITAL_STATUS_SYSTEM",
    "NULL_FLAVOR_SYSTEM",
    "OMB_RACE_SYSTEM",
    "US_CORE_RACE_URL",
    "MARITAL_STATUS",
    "OMB_RACE_CODES",
    "lookup_marital_status",
    "lookup_race",
    "marital_code_for",
    "race_display_for",
]
