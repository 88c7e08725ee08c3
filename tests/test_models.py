"""Tests for data models."""

from core.models import KeyLight, PropertyDescription, key_light_air_description


class TestKeyLight:
    """Tests for the KeyLight state."""

    def test_payload_shape(self):
        """Payload lists one light with on serialized as 1/0."""
        payload = KeyLight(on=True, brightness=50, temperature=244).to_payload()
        assert payload == {
            "lights": [{"brightness": 50, "temperature": 244, "on": 1}],
            "numberOfLights": 1,
        }
        assert list(payload) == ["lights", "numberOfLights"]
        assert list(payload["lights"][0]) == ["brightness", "temperature", "on"]

    def test_payload_off(self):
        payload = KeyLight(on=False).to_payload()
        assert payload["lights"][0]["on"] == 0


class TestDescriptions:
    """Tests for the static Key Light Air description."""

    def test_properties(self):
        description = key_light_air_description()
        assert description.name == "Key Light Air"
        assert description.at_type == ["OnOffSwitch", "Light"]
        assert set(description.properties) == {"on", "brightness", "temperature"}

        brightness = description.properties["brightness"]
        assert (brightness.minimum, brightness.maximum) == (3, 100)
        temperature = description.properties["temperature"]
        assert (temperature.minimum, temperature.maximum) == (2900, 7000)
        assert description.properties["on"].value is False

    def test_each_call_is_independent(self):
        """Callers may mutate a description without affecting the next one."""
        first = key_light_air_description()
        first.properties["on"].value = True
        assert key_light_air_description().properties["on"].value is False

    def test_property_as_dict_omits_unset_fields(self):
        description = PropertyDescription(name="on", type="boolean", value=False, label="On/Off")
        assert description.as_dict() == {
            "name": "on",
            "title": "On/Off",
            "type": "boolean",
            "readOnly": False,
        }
