"""
Property map → FHIR conversion modules.

Each module exposes a `convert` function for building FHIR resources
from flat property maps.

Usage:
    from fhir_x_props.to_fhir import patient
    fhir_patient = patient.convert({"name.family": "Doe"})
"""

from fhir_x_props.to_fhir import patient

__all__ = [
    "patient",
]
