"""
FHIR x Props: Mapping library between flat property maps and FHIR Patient resources.

Usage:
    # Individual converters
    from fhir_x_props import to_fhir, to_props
    fhir_patient = to_fhir.patient.convert({"name.given": "Jane", "name.family": "Doe"})
    properties = to_props.patient.convert(fhir_patient)

    # Build and render in one go
    from fhir_x_props import build, to_json
    text = to_json(build({"maritalStatus": "M"}))
"""

__version__ = "0.1.0"

from fhir_x_props import to_fhir, to_props
from fhir_x_props.serialize import FHIR_JSON_MEDIA_TYPE, to_json
from fhir_x_props.to_fhir.patient import build
from fhir_x_props.types import CodedValue, PropertyMap

__all__ = [
    # Conversion modules
    "to_fhir",
    "to_props",
    # Building and rendering
    "build",
    "to_json",
    "FHIR_JSON_MEDIA_TYPE",
    # Types
    "CodedValue",
    "PropertyMap",
]
