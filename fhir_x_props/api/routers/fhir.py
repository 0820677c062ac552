"""Patient resource endpoint.

Builds a FHIR Patient from a flat JSON object of property paths to
string values and returns it as FHIR JSON. Unrecognized keys and values
degrade to absent fields; the endpoint does not reject them.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Request, Response

from ...serialize import FHIR_JSON_MEDIA_TYPE, to_json
from ...to_fhir import patient as patient_to_fhir

logger = logging.getLogger(__name__)

router = APIRouter(tags=["fhir"])


@router.post(
    "/fhir",
    response_class=Response,
    responses={200: {"content": {FHIR_JSON_MEDIA_TYPE: {}}}},
)
def build_patient(
    request: Request,
    properties: Annotated[dict[str, str], Body()],
) -> Response:
    """Build a Patient resource from property paths such as ``name.family``."""
    patient = patient_to_fhir.convert(properties)
    logger.info("Built Patient from %d properties", len(properties))

    config = request.app.state.config
    return Response(
        content=to_json(patient, indent=config.json_indent),
        media_type=FHIR_JSON_MEDIA_TYPE,
    )
