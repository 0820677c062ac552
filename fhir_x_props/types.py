"""
Shared types for FHIR x Props conversions.
"""

from collections.abc import Mapping
from typing import NamedTuple, TypeAlias

# Flat input: dotted property path -> string value, e.g. {"name.family": "Doe"}
PropertyMap: TypeAlias = Mapping[str, str]


class CodedValue(NamedTuple):
    """A (code, system, display) entry from a controlled vocabulary."""

    code: str
    system: str
    display: str
