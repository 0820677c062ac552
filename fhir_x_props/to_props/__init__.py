"""
FHIR → property map conversion modules.

Each module exposes a `convert` function for flattening FHIR resources
back into dotted property maps.

Usage:
    from fhir_x_props.to_props import patient
    properties = patient.convert(fhir_patient)
"""

from fhir_x_props.to_props import patient

__all__ = [
    "patient",
]
