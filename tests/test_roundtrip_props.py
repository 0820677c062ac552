"""Roundtrip and rendering tests for property maps."""

import json

import pytest

from fhir_x_props import FHIR_JSON_MEDIA_TYPE, build, to_json, to_props
from fhir_x_props.vocab import MARITAL_STATUS, OMB_RACE_CODES


@pytest.fixture(scope="module")
def sample_properties() -> dict[str, str]:
    return {
        "identifier": "12345",
        "active": "false",
        "name.given": "John",
        "name.family": "Smith",
        "address.line": "42 Elm Rd",
        "address.city": "Anytown",
        "address.state": "CA",
        "address.postalCode": "12345",
        "address.country": "USA",
        "maritalStatus": "S",
        "race": "White",
    }


class TestPropertyRoundtrip:
    """Test to_props(build(p)) preserves recognized properties."""

    def test_roundtrip_preserves_all_properties(self, sample_properties):
        assert to_props.patient.convert(build(sample_properties)) == sample_properties

    @pytest.mark.parametrize("code", sorted(MARITAL_STATUS))
    def test_roundtrip_marital_codes(self, code):
        properties = {"maritalStatus": code}

        assert to_props.patient.convert(build(properties)) == properties

    @pytest.mark.parametrize("display", sorted(OMB_RACE_CODES))
    def test_roundtrip_race_categories(self, display):
        properties = {"race": display}

        assert to_props.patient.convert(build(properties)) == properties

    def test_unknown_keys_do_not_survive(self):
        result = to_props.patient.convert(build({"nickname": "JJ", "name.family": "Doe"}))

        assert result == {"name.family": "Doe"}


class TestJsonRendering:
    """Test to_json() output for built patients."""

    def test_media_type(self):
        assert FHIR_JSON_MEDIA_TYPE == "application/fhir+json"

    def test_renders_patient_resource(self, sample_properties):
        data = json.loads(to_json(build(sample_properties)))

        assert data["resourceType"] == "Patient"
        assert data["active"] is False
        assert data["identifier"] == [{"use": "official", "value": "12345"}]
        assert data["name"][0]["text"] == "John Smith"
        assert data["name"][0]["given"] == ["John"]
        assert data["maritalStatus"]["coding"][0]["display"] == "Never Married"

    def test_renders_race_extension(self, sample_properties):
        data = json.loads(to_json(build(sample_properties)))

        race = data["extension"][0]
        assert race["url"] == "http://hl7.org/fhir/us/core/StructureDefinition/us-core-race"
        omb = next(e for e in race["extension"] if e["url"] == "ombCategory")
        assert omb["valueCoding"]["code"] == "2106-3"
        assert omb["valueCoding"]["display"] == "White"

    def test_empty_properties_render(self):
        data = json.loads(to_json(build({})))

        assert data["resourceType"] == "Patient"
        assert data["name"][0]["text"] == " "
        assert "identifier" not in data
        assert "maritalStatus" not in data
        assert "extension" not in data

    def test_output_is_pretty_printed(self):
        assert "\n" in to_json(build({"name.family": "Doe"}))

    def test_compact_output(self):
        assert "\n" not in to_json(build({"name.family": "Doe"}), indent=None)

    def test_rendering_is_repeatable(self, sample_properties):
        assert to_json(build(sample_properties)) == to_json(build(sample_properties))
